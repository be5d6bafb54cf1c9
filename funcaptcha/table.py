"""Read-only FunCaptcha flow tables and the process-wide default table."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, List, Mapping, Optional, Union

import toml
from pydantic import ValidationError

from .constants import DEFAULT_FLOW_CONFIGS
from .errors import FlowNotFoundError, InvalidConfigError
from .utils import Flow, FlowConfig

logger = logging.getLogger(__name__)

FlowName = Union[Flow, str]


def _flow_name(flow: FlowName) -> str:
    return flow.value if isinstance(flow, Flow) else flow


class FlowTable:
    """
    An immutable table of FunCaptcha parameters keyed by flow name.

    Parameters
    ----------
    configs : Mapping[FlowName, FlowConfig]
        The configuration of each flow. The mapping is copied,
        so later changes to it do not affect the table.
    """

    def __init__(self, configs: Mapping[FlowName, FlowConfig]) -> None:
        self._configs: Mapping[str, FlowConfig] = MappingProxyType(
            {_flow_name(flow): config for flow, config in configs.items()}
        )

        self._keys: Mapping[str, str] = MappingProxyType(
            {flow: config.public_key for flow, config in self._configs.items()}
        )

        self._presets: Mapping[str, str] = MappingProxyType(
            {flow: config.preset for flow, config in self._configs.items()}
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(flows={self.flows!r})"

    def __contains__(self, flow: object) -> bool:
        if not isinstance(flow, str):
            return False

        return _flow_name(flow) in self._configs

    def __iter__(self) -> Iterator[str]:
        return iter(self._configs)

    def __len__(self) -> int:
        return len(self._configs)

    @property
    def flows(self) -> List[str]:
        """The names of the flows in the table."""
        return list(self._configs)

    @property
    def keys(self) -> Mapping[str, str]:
        """A read-only mapping of flow names to public keys."""
        return self._keys

    @property
    def presets(self) -> Mapping[str, str]:
        """A read-only mapping of flow names to preset names."""
        return self._presets

    @classmethod
    def from_toml(
        cls, path: Union[Path, str], *, base: Optional[FlowTable] = None
    ) -> FlowTable:
        """
        Create a table from a base table and the overrides in a TOML file.

        Overrides are read from the ``flows`` table of the file, one
        sub-table per flow with optional ``public_key`` and ``preset`` keys.

        Parameters
        ----------
        path : Union[Path, str]
            The path to the TOML file.
        base : Optional[FlowTable], optional
            The table to apply the overrides to, by default None.
            If None, the default table is used.

        Returns
        -------
        FlowTable
            A new table with the overrides applied.

        Raises
        ------
        InvalidConfigError
            If the file cannot be read, is not valid UTF-8 or TOML
            or contains an invalid override.
        """
        try:
            config = toml.load(path)
        except FileNotFoundError as err:
            raise InvalidConfigError(
                f"The configuration file '{path}' was not found."
            ) from err
        except OSError as err:
            raise InvalidConfigError(
                f"The configuration file '{path}' could not be read: {err}"
            ) from err
        except UnicodeDecodeError as err:
            raise InvalidConfigError(
                f"The configuration file '{path}' is not valid UTF-8: {err}"
            ) from err
        except toml.TomlDecodeError as err:
            raise InvalidConfigError(
                f"The configuration file '{path}' is not valid TOML: {err}"
            ) from err

        overrides = config.get("flows", {})

        if not isinstance(overrides, dict):
            raise InvalidConfigError("The 'flows' entry must be a table.")

        if base is None:
            base = DEFAULT_TABLE

        table = base.with_overrides(overrides)
        logger.debug("Loaded %d flow override(s) from %s", len(overrides), path)
        return table

    def with_overrides(self, overrides: Mapping[str, Mapping[str, Any]]) -> FlowTable:
        """
        Create a new table with the given overrides applied.

        An override for a known flow may set either field and keeps the
        other one. An override for a new flow must set both fields.

        Parameters
        ----------
        overrides : Mapping[str, Mapping[str, Any]]
            The override fields of each flow.

        Returns
        -------
        FlowTable
            A new table with the overrides applied. This table is unchanged.

        Raises
        ------
        InvalidConfigError
            If an override is not a mapping or contains invalid values.
        """
        configs = dict(self._configs)

        for flow, fields in overrides.items():
            if not isinstance(fields, Mapping):
                raise InvalidConfigError(
                    f"The override for flow '{flow}' must be a table."
                )

            base_config = configs.get(flow)
            values = dict(fields)

            if base_config is not None:
                values = {**base_config.model_dump(), **values}

            try:
                configs[flow] = FlowConfig.model_validate(values)
            except ValidationError as err:
                raise InvalidConfigError(
                    f"The override for flow '{flow}' is invalid: {err}"
                ) from err

        return FlowTable(configs)

    def get_config(self, flow: FlowName) -> FlowConfig:
        """
        Get the FunCaptcha parameters of a flow.

        Parameters
        ----------
        flow : FlowName
            The flow to get the parameters of.

        Returns
        -------
        FlowConfig
            The public key and preset of the flow.

        Raises
        ------
        FlowNotFoundError
            If the flow is not in the table.
        """
        name = _flow_name(flow)

        try:
            return self._configs[name]
        except KeyError:
            raise FlowNotFoundError(name) from None

    def lookup_key(self, flow: FlowName) -> str:
        """Get the public key of a flow, raising FlowNotFoundError if absent."""
        return self.get_config(flow).public_key

    def lookup_preset(self, flow: FlowName) -> str:
        """Get the preset of a flow, raising FlowNotFoundError if absent."""
        return self.get_config(flow).preset


DEFAULT_TABLE = FlowTable(
    {
        flow: FlowConfig.model_validate(config)
        for flow, config in DEFAULT_FLOW_CONFIGS.items()
    }
)

DEFAULT_KEYS = DEFAULT_TABLE.keys
DEFAULT_PRESETS = DEFAULT_TABLE.presets


def get_config(flow: FlowName) -> FlowConfig:
    """Get the default FunCaptcha parameters of a flow."""
    return DEFAULT_TABLE.get_config(flow)


def lookup_key(flow: FlowName) -> str:
    """Get the default public key of a flow."""
    return DEFAULT_TABLE.lookup_key(flow)


def lookup_preset(flow: FlowName) -> str:
    """Get the default preset of a flow."""
    return DEFAULT_TABLE.lookup_preset(flow)
