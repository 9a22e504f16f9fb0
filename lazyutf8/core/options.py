"""Decoder options shared by the incremental decoder and the CLI."""

from dataclasses import dataclass

from .classifier import LengthPolicy
from .stream import REPLACEMENT_CHARACTER


@dataclass(frozen=True)
class CodecOptions:
    """Length policy and the text substituted for invalid units."""

    policy: LengthPolicy = LengthPolicy.STRICT
    replacement: str = REPLACEMENT_CHARACTER

    @classmethod
    def from_names(cls, policy: str = "strict", replacement: str = REPLACEMENT_CHARACTER) -> "CodecOptions":
        try:
            resolved = LengthPolicy[policy.upper()]
        except KeyError:
            choices = ", ".join(member.name.lower() for member in LengthPolicy)
            raise ValueError(f"Unknown length policy {policy!r} (expected one of: {choices})") from None
        return cls(policy=resolved, replacement=replacement)
