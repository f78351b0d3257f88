import os

import pytest

from fabricweaver.builders.ca_client_command_builder import FabricCAClientCommandBuilder
from fabricweaver.shared.modules.command.enums.ca_client_enums import FabricCAClientAction, FabricCAClientCommand
from fabricweaver.shared.modules.command.errors import InvalidCommandError


@pytest.fixture
def builder(runner, settings):
    return FabricCAClientCommandBuilder(runner=runner, settings=settings)


class TestFabricCAClientCommandBuilder:
    def test_enroll(self, builder):
        builder.set_command(FabricCAClientCommand.ENROLL)
        builder.set_connection_options({"url": "https://admin:adminpw@ca:7054", "mspdir": "msp"})
        builder.set_tls_options({"certfiles": ["tls-ca.pem"]})
        builder.set_csr_options({"hosts": ["peer0", "localhost"]})
        builder.set_enrollment_options({"profile": "tls"})
        assert builder.build() == (
            "fabric-ca-client enroll --url https://admin:adminpw@ca:7054 --mspdir msp "
            "--tls.certfiles tls-ca.pem --csr.hosts peer0,localhost --enrollment.profile tls"
        )

    def test_register_normalizes_identity_type(self, builder):
        builder.set_command(FabricCAClientCommand.REGISTER).set_identity_options(
            {"name": "peer0", "secret": "pw", "type": "PEER"}
        )
        assert builder.get_args() == ["register", "--id.name", "peer0", "--id.secret", "pw", "--id.type", "peer"]

    def test_unknown_identity_type_falls_back_to_admin(self, builder):
        builder.set_command(FabricCAClientCommand.REGISTER).set_identity_options({"type": "operator"})
        assert builder.get_args() == ["register", "--id.type", "admin"]

    def test_action_is_positional_after_subcommand(self, builder):
        builder.set_command(FabricCAClientCommand.IDENTITY).set_action(FabricCAClientAction.LIST)
        builder.set_connection_options({"url": "https://ca:7054"})
        assert builder.build() == "fabric-ca-client identity list --url https://ca:7054"

    def test_action_scoped_to_its_subcommand(self, builder):
        builder.set_command(FabricCAClientCommand.AFFILIATION).set_action("add")
        builder.set_command(FabricCAClientCommand.CERTIFICATE)
        assert builder.get_args() == ["certificate"]
        builder.set_command(FabricCAClientCommand.AFFILIATION)
        assert builder.get_args() == ["affiliation", "add"]

    def test_action_rejected_on_enroll(self, builder):
        builder.set_command(FabricCAClientCommand.ENROLL)
        with pytest.raises(InvalidCommandError):
            builder.set_action(FabricCAClientAction.ADD)
        assert builder.actions == {}

    def test_revoke(self, builder):
        builder.set_command(FabricCAClientCommand.REVOKE).set_revoke_options(
            {"name": "user1", "reason": "keycompromise", "gencrl": True}
        )
        assert builder.get_args() == [
            "revoke", "--revoke.name", "user1", "--revoke.reason", "keycompromise", "--gencrl",
        ]

    def test_groups_rejected_on_wrong_subcommand(self, builder):
        builder.set_command(FabricCAClientCommand.REGISTER)
        with pytest.raises(InvalidCommandError):
            builder.set_csr_options({"cn": "x"})
        with pytest.raises(InvalidCommandError):
            builder.set_enrollment_options({"profile": "tls"})
        with pytest.raises(InvalidCommandError):
            builder.set_revoke_options({"name": "x"})
        builder.set_command(FabricCAClientCommand.VERSION)
        with pytest.raises(InvalidCommandError):
            builder.set_connection_options({"url": "https://ca:7054"})
        assert builder.args.get(FabricCAClientCommand.REGISTER) == {}
        assert builder.args.get(FabricCAClientCommand.VERSION) == {}

    def test_change_key_name(self, builder, tmp_path):
        keystore = tmp_path / "msp" / "keystore"
        keystore.mkdir(parents=True)
        (keystore / "a1b2c3_sk").write_text("KEY")

        path = builder.change_key_name(str(tmp_path / "msp"))

        assert path == os.path.join(str(keystore), "key.pem")
        assert os.listdir(keystore) == ["key.pem"]
        assert (keystore / "key.pem").read_text() == "KEY"

    def test_change_key_name_empty_keystore_raises(self, builder, tmp_path):
        (tmp_path / "msp" / "keystore").mkdir(parents=True)
        with pytest.raises(FileNotFoundError):
            builder.change_key_name(str(tmp_path / "msp"))

    def test_change_key_name_without_dir_is_a_no_op(self, builder):
        assert builder.change_key_name(None) is None
