import pytest
from pydantic import ValidationError

from fabricweaver.builders.ca_server_command_builder import FabricCAServerCommandBuilder
from fabricweaver.shared.modules.command.enums.ca_server_enums import ClientAuthType, FabricCAServerCommand
from fabricweaver.shared.modules.command.errors import InvalidCommandError


@pytest.fixture
def builder(runner, settings):
    return FabricCAServerCommandBuilder(runner=runner, settings=settings)


class TestFabricCAServerCommandBuilder:
    def test_start_with_general_and_tls(self, builder):
        builder.set_command(FabricCAServerCommand.START)
        builder.set_general_options({"port": 7054, "boot": "admin:adminpw", "debug": False})
        builder.set_server_tls({"enabled": True, "clientauth_type": ClientAuthType.NO_CLIENT_CERT})
        assert builder.build() == (
            "fabric-ca-server start --port 7054 --boot admin:adminpw "
            "--tls.enabled --tls.clientauth.type noclientcert"
        )

    def test_init_with_csr_dedupes_hosts(self, builder):
        builder.set_command(FabricCAServerCommand.INIT).set_csr(
            {"cn": "ca.org1", "hosts": ["localhost", "ca.org1", "localhost"]}
        )
        assert builder.get_args() == ["init", "--csr.cn", "ca.org1", "--csr.hosts", "localhost,ca.org1"]

    def test_database_and_registry(self, builder):
        builder.set_command(FabricCAServerCommand.START)
        builder.set_database({"type": "postgres", "datasource": "host=db"})
        builder.set_registry({"max_enrollments": -1, "allow_identities_remove": True})
        assert builder.get_args() == [
            "start",
            "--db.type", "postgres",
            "--db.datasource", "host=db",
            "--registry.maxenrollments", "-1",
            "--cfg.identities.allowremove",
        ]

    def test_ca_cors_ldap_idemix_intermediate(self, builder):
        builder.set_command(FabricCAServerCommand.START)
        builder.set_ca({"name": "ca-org1"})
        builder.set_cors({"enabled": True, "origins": ["*"]})
        builder.set_ldap({"enabled": False, "url": "ldap://x"})
        builder.set_idemix({"curve": "amcl.Fp256bn"})
        builder.set_intermediate({"parentserver_url": "https://root:7054"})
        assert builder.build() == (
            "fabric-ca-server start --ca.name ca-org1 --cors.enabled --cors.origins * "
            "--ldap.url ldap://x --idemix.curve amcl.Fp256bn "
            "--intermediate.parentserver.url https://root:7054"
        )

    @pytest.mark.parametrize("boot", ["admin", "admin:", ":pw"])
    def test_malformed_boot_is_rejected(self, builder, boot):
        builder.set_command(FabricCAServerCommand.INIT)
        with pytest.raises(ValidationError):
            builder.set_general_options({"boot": boot})

    def test_non_integer_port_is_rejected(self, builder):
        builder.set_command(FabricCAServerCommand.START)
        with pytest.raises(ValidationError):
            builder.set_general_options({"port": "seventy"})

    def test_groups_rejected_on_version(self, builder):
        builder.set_command(FabricCAServerCommand.VERSION)
        with pytest.raises(InvalidCommandError):
            builder.set_general_options({"port": 1})
        with pytest.raises(InvalidCommandError):
            builder.set_server_tls({"enabled": True})
        with pytest.raises(InvalidCommandError):
            builder.set_database({"type": "sqlite3"})
        assert builder.args.get(FabricCAServerCommand.VERSION) == {}

    def test_help_on_any_command(self, builder):
        builder.set_command(FabricCAServerCommand.VERSION).set_help(True)
        assert builder.build() == "fabric-ca-server version --help"

    def test_start_readiness_pattern(self, builder):
        builder.set_command(FabricCAServerCommand.START)
        spec = builder.to_command_spec()
        assert spec.readiness_pattern == r"\[\s*INFO\s*\] Listening on http"
        builder.set_command(FabricCAServerCommand.INIT)
        assert builder.get_readiness_pattern() is None
