from typing import Optional

from fabricweaver.builders.base_command_builder import BaseCommandBuilder
from fabricweaver.shared.modules.command.enums.fabric_binary_enum import FabricBinary
from fabricweaver.shared.modules.command.enums.orderer_command_enum import OrdererCommand


class OrdererCommandBuilder(BaseCommandBuilder):
    """
    Builds `orderer` invocations. The orderer takes its configuration from
    orderer.yaml / ORDERER_* variables, so only the subcommand and help are set
    here; pass the environment to execute().
    """

    binary = FabricBinary.ORDERER
    command_enum = OrdererCommand
    default_command = OrdererCommand.START
    readiness_patterns = {
        OrdererCommand.START: r"Beginning to serve requests",
    }

    def set_help(self, show: Optional[bool] = None):
        return self._set_option("help", show, *OrdererCommand)
