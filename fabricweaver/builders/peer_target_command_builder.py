from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from fabricweaver.builders.base_command_builder import BaseCommandBuilder
from fabricweaver.shared.modules.command.models.peer_options import PeerTargetOptions


class PeerTargetCommandBuilder(BaseCommandBuilder):
    """
    Base for `peer` builders whose subcommands address endorsing peers.

    Targets are kept per subcommand and rendered after the other flags as
    repeated `--peerAddresses <addr> [--tlsRootCertFiles <pem>]` pairs.
    """

    peer_target_commands: Tuple[Enum, ...] = ()

    def __init__(self, logger=None, runner=None, settings=None):
        super().__init__(logger=logger, runner=runner, settings=settings)
        self.peer_targets: Dict[Enum, PeerTargetOptions] = {}

    def set_peer_targets(self, options: Optional[Union[PeerTargetOptions, Mapping[str, Any]]] = None):
        if options is None:
            return self
        self._assert_command(*self.peer_target_commands)
        if not isinstance(options, PeerTargetOptions):
            options = PeerTargetOptions.model_validate(options)
        self.logger.debug(f"Setting {self.command.value} peer targets: {', '.join(options.peer_addresses)}")
        self.peer_targets[self.command] = options
        return self

    def set_peer_addresses(
        self, peer_addresses: Optional[List[str]] = None, tls_root_cert_files: Optional[List[str]] = None
    ):
        if not peer_addresses:
            return self
        return self.set_peer_targets(
            {"peer_addresses": peer_addresses, "tls_root_cert_files": tls_root_cert_files}
        )

    def _get_trailing_args(self) -> List[str]:
        targets = self.peer_targets.get(self.command)
        return targets.to_tokens() if targets else []
