import os
from typing import Any, Dict, List, Mapping, Optional, Union

from fabricweaver.builders.base_command_builder import BaseCommandBuilder
from fabricweaver.shared.modules.command.enums.ca_client_enums import FabricCAClientAction, FabricCAClientCommand
from fabricweaver.shared.modules.command.enums.fabric_binary_enum import FabricBinary
from fabricweaver.shared.modules.command.models.ca_client_options import (
    CAClientConnectionOptions,
    CAClientCSROptions,
    CAClientEnrollmentOptions,
    CAClientIdentityOptions,
    CAClientRevokeOptions,
    CAClientTLSOptions,
)

# Subcommands that talk to a running CA server
SERVER_COMMANDS = tuple(
    c for c in FabricCAClientCommand
    if c not in (FabricCAClientCommand.COMPLETION, FabricCAClientCommand.HELP, FabricCAClientCommand.VERSION)
)
RESOURCE_COMMANDS = (
    FabricCAClientCommand.AFFILIATION,
    FabricCAClientCommand.IDENTITY,
    FabricCAClientCommand.CERTIFICATE,
)
CSR_COMMANDS = (FabricCAClientCommand.ENROLL, FabricCAClientCommand.REENROLL, FabricCAClientCommand.GENCSR)
ENROLLMENT_COMMANDS = (FabricCAClientCommand.ENROLL, FabricCAClientCommand.REENROLL)
IDENTITY_COMMANDS = (FabricCAClientCommand.REGISTER, FabricCAClientCommand.IDENTITY)

Options = Optional[Union[Mapping[str, Any], Any]]


class FabricCAClientCommandBuilder(BaseCommandBuilder):
    """
    Builds `fabric-ca-client` invocations (enroll, register, revoke, ...).

    Example:
        builder = (FabricCAClientCommandBuilder()
            .set_command(FabricCAClientCommand.REGISTER)
            .set_connection_options({"url": "https://ca:7054", "mspdir": "admin/msp"})
            .set_identity_options({"name": "peer0", "secret": "pw", "type": "PEER"}))
        builder.build()
        # -> "fabric-ca-client register --url https://ca:7054 --mspdir admin/msp
        #     --id.name peer0 --id.secret pw --id.type peer"
    """

    binary = FabricBinary.CA_CLIENT
    command_enum = FabricCAClientCommand
    default_command = FabricCAClientCommand.HELP

    def __init__(self, logger=None, runner=None, settings=None):
        super().__init__(logger=logger, runner=runner, settings=settings)
        self.actions: Dict[FabricCAClientCommand, FabricCAClientAction] = {}

    def set_action(self, action: Optional[Union[FabricCAClientAction, str]] = None):
        """Positional action for affiliation / identity / certificate, e.g. `identity list`."""
        if action is None:
            return self
        self._assert_command(*RESOURCE_COMMANDS)
        action = FabricCAClientAction(action)
        self.logger.debug(f"Setting {self.command.value} action: {action.value}")
        self.actions[self.command] = action
        return self

    def set_connection_options(self, options: Options = None):
        return self._apply_options(options, CAClientConnectionOptions, *SERVER_COMMANDS)

    def set_tls_options(self, options: Options = None):
        return self._apply_options(options, CAClientTLSOptions, *SERVER_COMMANDS)

    def set_csr_options(self, options: Options = None):
        return self._apply_options(options, CAClientCSROptions, *CSR_COMMANDS)

    def set_enrollment_options(self, options: Options = None):
        return self._apply_options(options, CAClientEnrollmentOptions, *ENROLLMENT_COMMANDS)

    def set_identity_options(self, options: Options = None):
        return self._apply_options(options, CAClientIdentityOptions, *IDENTITY_COMMANDS)

    def set_revoke_options(self, options: Options = None):
        return self._apply_options(options, CAClientRevokeOptions, FabricCAClientCommand.REVOKE)

    def set_help(self, show: Optional[bool] = None):
        return self._set_option("help", show, *FabricCAClientCommand)

    def change_key_name(self, msp_dir: Optional[str] = None) -> Optional[str]:
        """
        Rename the private key written by enroll (a random *_sk name) to
        keystore/key.pem so configs can reference a stable path.

        Returns:
            str: The new key path, or None when msp_dir is None
        """
        if msp_dir is None:
            return None
        keystore = os.path.join(msp_dir, "keystore")
        try:
            entries = sorted(os.listdir(keystore))
            if not entries:
                raise FileNotFoundError(f"No key found in {keystore}")
            current = os.path.join(keystore, entries[0])
            final = os.path.join(keystore, "key.pem")
            if current != final:
                os.replace(current, final)
        except OSError as e:
            self.logger.error(f"Failed to rename the key file in the MSP directory: {e}")
            raise
        self.logger.debug(f"Renamed {current} -> {final}")
        return final

    def _get_positionals(self) -> List[str]:
        action = self.actions.get(self.command)
        return [action.value] if action else []
