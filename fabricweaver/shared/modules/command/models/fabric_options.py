from typing import Dict

from pydantic import BaseModel, ConfigDict

from fabricweaver.shared.modules.command.models.argument_map import ArgValue


class FabricOptions(BaseModel):
    """
    Base class for option groups.

    Field declaration order is the flag order on the command line. Fields whose
    CLI key differs from the Python name declare it as `serialization_alias`
    (e.g. `channel_id` -> `channel_id`, `certfile` -> `tls.certfile`).
    Unset fields stay None and are never rendered.
    """
    model_config = ConfigDict(use_enum_values=True, extra="forbid")

    def to_arguments(self) -> Dict[str, ArgValue]:
        """Defined fields only, keyed by CLI flag name, in declaration order."""
        return self.model_dump(by_alias=True, exclude_none=True)
