import pytest
from pydantic import ValidationError

from fabricweaver.builders.peer_lifecycle_chaincode_command_builder import PeerLifecycleChaincodeCommandBuilder
from fabricweaver.shared.modules.command.enums.peer_lifecycle_command_enum import (
    ChaincodeLanguage,
    PeerLifecycleChaincodeCommand,
)
from fabricweaver.shared.modules.command.errors import InvalidCommandError


@pytest.fixture
def builder(runner, settings):
    return PeerLifecycleChaincodeCommandBuilder(runner=runner, settings=settings)


class TestPeerLifecycleChaincodeCommandBuilder:
    def test_package(self, builder):
        builder.set_destination("basic.tar.gz").set_package_options(
            {"path": "./chaincode", "lang": ChaincodeLanguage.NODE, "label": "basic_1.0"}
        )
        assert builder.build() == (
            "peer lifecycle chaincode package basic.tar.gz --path ./chaincode --lang node --label basic_1.0"
        )

    def test_base_command_is_two_tokens(self, builder):
        assert builder.get_invocation()[:3] == ["lifecycle", "chaincode", "package"]

    def test_install(self, runner, builder):
        builder.set_command(PeerLifecycleChaincodeCommand.INSTALL).set_destination("basic.tar.gz").execute()
        assert runner.specs[0].to_subprocess() == ["peer", "lifecycle", "chaincode", "install", "basic.tar.gz"]

    def test_commit_with_peer_targets(self, builder):
        builder.set_command(PeerLifecycleChaincodeCommand.COMMIT)
        builder.set_orderer_connection_options(
            {"orderer": "orderer:7050", "orderer_tls_hostname_override": "orderer", "tls": True, "cafile": "ca.pem"}
        )
        builder.set_definition_options({"channel_id": "mychannel", "name": "basic", "version": "1.0", "sequence": 1})
        builder.set_peer_addresses(["peer0.org1:7051", "peer0.org2:9051"], ["org1.pem", "org2.pem"])
        assert builder.get_args() == [
            "commit",
            "--orderer", "orderer:7050",
            "--ordererTLSHostnameOverride", "orderer",
            "--tls",
            "--cafile", "ca.pem",
            "--channelID", "mychannel",
            "--name", "basic",
            "--version", "1.0",
            "--sequence", "1",
            "--peerAddresses", "peer0.org1:7051", "--tlsRootCertFiles", "org1.pem",
            "--peerAddresses", "peer0.org2:9051", "--tlsRootCertFiles", "org2.pem",
        ]

    def test_peer_targets_without_tls_roots(self, builder):
        builder.set_command(PeerLifecycleChaincodeCommand.QUERYCOMMITTED).set_peer_addresses(["peer0:7051"])
        assert builder.get_args() == ["querycommitted", "--peerAddresses", "peer0:7051"]

    def test_mismatched_tls_roots_rejected(self, builder):
        builder.set_command(PeerLifecycleChaincodeCommand.COMMIT)
        with pytest.raises(ValidationError):
            builder.set_peer_addresses(["a:7051", "b:9051"], ["a.pem"])
        assert builder.peer_targets == {}

    def test_empty_peer_addresses_is_a_no_op(self, builder):
        builder.set_peer_addresses([])
        assert builder.get_args() == ["package"]

    def test_peer_targets_rejected_on_package(self, builder):
        with pytest.raises(InvalidCommandError):
            builder.set_peer_addresses(["peer0:7051"])

    def test_check_commit_readiness_json(self, builder):
        builder.set_command(PeerLifecycleChaincodeCommand.CHECKCOMMITREADINESS)
        builder.set_definition_options({"channel_id": "ch", "name": "basic", "version": "1.0", "sequence": 2})
        builder.set_orderer_connection_options({"tls": True, "cafile": "ca.pem"})
        builder.set_output("json")
        assert builder.build().endswith("--tls --cafile ca.pem --output json")

    def test_approve_with_package_id(self, builder):
        builder.set_command(PeerLifecycleChaincodeCommand.APPROVEFORMYORG).set_package_id("basic_1.0:abc")
        assert builder.get_args() == ["approveformyorg", "--package-id", "basic_1.0:abc"]

    def test_groups_rejected_on_wrong_subcommand(self, builder):
        with pytest.raises(InvalidCommandError):
            builder.set_definition_options({"name": "basic"})
        with pytest.raises(InvalidCommandError):
            builder.set_output("json")
        builder.set_command(PeerLifecycleChaincodeCommand.COMMIT)
        with pytest.raises(InvalidCommandError):
            builder.set_package_options({"label": "x"})
        with pytest.raises(InvalidCommandError):
            builder.set_destination("x.tar.gz")
        assert builder.args.get(PeerLifecycleChaincodeCommand.PACKAGE) == {}
        assert builder.args.get(PeerLifecycleChaincodeCommand.COMMIT) == {}

    def test_sequence_must_be_positive(self, builder):
        builder.set_command(PeerLifecycleChaincodeCommand.COMMIT)
        with pytest.raises(ValidationError):
            builder.set_definition_options({"sequence": 0})
