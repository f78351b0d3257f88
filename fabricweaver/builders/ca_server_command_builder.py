from typing import Any, Mapping, Optional, Union

from fabricweaver.builders.base_command_builder import BaseCommandBuilder
from fabricweaver.shared.modules.command.enums.ca_server_enums import FabricCAServerCommand
from fabricweaver.shared.modules.command.enums.fabric_binary_enum import FabricBinary
from fabricweaver.shared.modules.command.models.ca_server_options import (
    CAServerCAOptions,
    CAServerCorsOptions,
    CAServerCSROptions,
    CAServerDBOptions,
    CAServerGeneralOptions,
    CAServerIdemixOptions,
    CAServerIntermediateOptions,
    CAServerLDAPOptions,
    CAServerRegistryOptions,
    CAServerTLSOptions,
)

# Every configuration flag of fabric-ca-server is accepted by both init and start
SERVER_COMMANDS = (FabricCAServerCommand.INIT, FabricCAServerCommand.START)

Options = Optional[Union[Mapping[str, Any], Any]]


class FabricCAServerCommandBuilder(BaseCommandBuilder):
    """
    Builds `fabric-ca-server` invocations. `start` is treated as a
    long-running server: execute() returns once the CA reports it is listening.
    """

    binary = FabricBinary.CA_SERVER
    command_enum = FabricCAServerCommand
    default_command = FabricCAServerCommand.HELP
    readiness_patterns = {
        FabricCAServerCommand.START: r"\[\s*INFO\s*\] Listening on http",
    }

    def set_general_options(self, options: Options = None):
        return self._apply_options(options, CAServerGeneralOptions, *SERVER_COMMANDS)

    def set_server_tls(self, options: Options = None):
        return self._apply_options(options, CAServerTLSOptions, *SERVER_COMMANDS)

    def set_ca(self, options: Options = None):
        return self._apply_options(options, CAServerCAOptions, *SERVER_COMMANDS)

    def set_cors(self, options: Options = None):
        return self._apply_options(options, CAServerCorsOptions, *SERVER_COMMANDS)

    def set_csr(self, options: Options = None):
        return self._apply_options(options, CAServerCSROptions, *SERVER_COMMANDS)

    def set_database(self, options: Options = None):
        return self._apply_options(options, CAServerDBOptions, *SERVER_COMMANDS)

    def set_idemix(self, options: Options = None):
        return self._apply_options(options, CAServerIdemixOptions, *SERVER_COMMANDS)

    def set_intermediate(self, options: Options = None):
        return self._apply_options(options, CAServerIntermediateOptions, *SERVER_COMMANDS)

    def set_ldap(self, options: Options = None):
        return self._apply_options(options, CAServerLDAPOptions, *SERVER_COMMANDS)

    def set_registry(self, options: Options = None):
        return self._apply_options(options, CAServerRegistryOptions, *SERVER_COMMANDS)

    def set_help(self, show: Optional[bool] = None):
        return self._set_option("help", show, *FabricCAServerCommand)
