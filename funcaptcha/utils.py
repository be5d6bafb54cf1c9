"""Utility classes for the FunCaptcha flow tables."""

from __future__ import annotations

import argparse
from enum import Enum
from pathlib import Path
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, StringConstraints

from .constants import PRESET_PATTERN, PUBLIC_KEY_PATTERN

PublicKey = Annotated[str, StringConstraints(pattern=PUBLIC_KEY_PATTERN)]
Preset = Annotated[str, StringConstraints(pattern=PRESET_PATTERN)]


class EnumStrMixin:
    """A mixin class that adds a string conversion method for enums."""

    name: str

    def __str__(self) -> str:
        return self.name.lower()


class Flow(str, Enum):
    """Roblox flows with a default FunCaptcha configuration."""

    LOGIN = "Login"
    SIGNUP = "Signup"
    GROUP_JOIN = "GroupJoin"
    FOLLOW_USER = "FollowUser"
    WALL_POST = "WallPost"
    GENERIC_CAPTCHA = "GenericCaptcha"

    def __str__(self) -> str:
        return self.value


class OutputFormat(EnumStrMixin, Enum):
    """Output formats available on the command line."""

    TABLE = "table"
    JSON = "json"


class FlowConfig(BaseModel):
    """A class for representing the FunCaptcha parameters of a single flow."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    public_key: PublicKey
    preset: Preset


class Args(BaseModel):
    """A class for representing the arguments passed to the program."""

    flows: List[str]
    config: Optional[Path]
    output_format: OutputFormat
    keys_only: bool
    presets_only: bool
    verbose: bool

    @classmethod
    def from_namespace(cls, namespace: argparse.Namespace) -> Args:
        """
        Create an instance of Args from an argparse namespace.

        Parameters
        ----------
        namespace : argparse.Namespace
            The namespace to create the Args instance from.

        Returns
        -------
        Args
            An instance of Args created from the namespace.
        """
        return cls(**namespace.__dict__)
