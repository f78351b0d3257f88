import pytest

from fabricweaver.builders.peer_chaincode_command_builder import PeerChaincodeCommandBuilder
from fabricweaver.shared.modules.command.enums.peer_chaincode_command_enum import PeerChaincodeCommand
from fabricweaver.shared.modules.command.errors import InvalidCommandError


@pytest.fixture
def builder(runner, settings):
    return PeerChaincodeCommandBuilder(runner=runner, settings=settings)


class TestPeerChaincodeCommandBuilder:
    def test_package(self, builder):
        builder.set_location("mycc.out").set_spec_options(
            {"name": "mycc", "version": "1.0", "path": "./chaincode", "lang": "golang"}
        )
        assert builder.build() == (
            "peer chaincode package mycc.out --name mycc --version 1.0 --path ./chaincode --lang golang"
        )

    def test_signpackage_takes_two_positionals(self, builder):
        builder.set_command(PeerChaincodeCommand.SIGNPACKAGE).set_location("mycc.out", "signed.out")
        assert builder.get_args() == ["signpackage", "mycc.out", "signed.out"]

    def test_signed_output_only_for_signpackage(self, builder):
        with pytest.raises(InvalidCommandError):
            builder.set_location("mycc.out", "signed.out")
        assert builder.locations == {}

    def test_invoke(self, builder):
        builder.set_command(PeerChaincodeCommand.INVOKE)
        builder.set_orderer_connection_options({"orderer": "orderer:7050", "tls": True, "cafile": "ca.pem"})
        builder.set_spec_options({"name": "mycc", "channel_id": "ch", "ctor": '{"Args":["init"]}'})
        builder.set_invoke_options({"is_init": True, "wait_for_event": True})
        builder.set_peer_addresses(["peer0:7051"], ["peer0.pem"])
        assert builder.get_args() == [
            "invoke",
            "--orderer", "orderer:7050", "--tls", "--cafile", "ca.pem",
            "--name", "mycc", "--ctor", '{"Args":["init"]}', "--channelID", "ch",
            "--isInit", "--waitForEvent",
            "--peerAddresses", "peer0:7051", "--tlsRootCertFiles", "peer0.pem",
        ]

    def test_list_installed(self, builder):
        builder.set_command(PeerChaincodeCommand.LIST).set_list_options({"installed": True})
        assert builder.build() == "peer chaincode list --installed"

    def test_groups_rejected_on_wrong_subcommand(self, builder):
        builder.set_command(PeerChaincodeCommand.QUERY)
        with pytest.raises(InvalidCommandError):
            builder.set_invoke_options({"is_init": True})
        with pytest.raises(InvalidCommandError):
            builder.set_orderer_connection_options({"orderer": "orderer:7050"})
        with pytest.raises(InvalidCommandError):
            builder.set_location("mycc.out")
        assert builder.args.get(PeerChaincodeCommand.QUERY) == {}
