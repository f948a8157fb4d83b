"""
Configuration for the nlworld.parser module.

Defines ParserSettings, a frozen dataclass carrying runtime options for tokenizing and
parsing a world export. Defaults describe the documented behavior; env/TOML loaders exist
for the CLI and callers that want them, the parse functions never read them implicitly.

Import DAG discipline
- Depends only on stdlib and nlworld.core.constants.

Notes
- unknown_sections="fall_through" keeps the classifier's contract: a single-cell row that
  is not a wire token is ordinary data for the active section.
- unknown_sections="error" rejects single-cell UPPER_SNAKE rows that are not wire tokens,
  except inside OUTPUT where any text is a console line.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Literal

from nlworld.core.constants import DEFAULT_ENCODING

logger = logging.getLogger(__name__)

UnknownSectionPolicy = Literal["fall_through", "error"]

_POLICIES: frozenset[str] = frozenset({"fall_through", "error"})


def _bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
    return False


@dataclass(frozen=True)
class ParserSettings:
    """
    Runtime settings for the world parser.

    Attributes:
        unknown_sections (Literal["fall_through","error"]): Policy for single-cell rows that
            look like a section token but are not in the vocabulary.
        encoding (str): Text encoding used when a binary stream is parsed.
        strict_quoting (bool): If True, malformed quoting raises RowSyntaxError.
        skip_blank_rows (bool): If True, zero-cell rows are dropped before classification.

    Examples:
        >>> from nlworld.parser.config import ParserSettings
        >>> ParserSettings(unknown_sections="error")  # doctest: +ELLIPSIS
        ParserSettings(...)
    """

    unknown_sections: UnknownSectionPolicy = "fall_through"
    encoding: str = DEFAULT_ENCODING
    strict_quoting: bool = True
    skip_blank_rows: bool = True

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: ParserSettings, cfg: dict[str, Any] | None) -> ParserSettings:
        """Apply a loose config mapping onto ParserSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        if "unknown_sections" in cfg and isinstance(cfg["unknown_sections"], str):
            policy = cfg["unknown_sections"].strip().lower()
            if policy in _POLICIES:
                s = replace(s, unknown_sections=policy)  # type: ignore[arg-type]
            else:
                logger.warning("ignoring unknown_sections=%r (allowed: %s)", policy, sorted(_POLICIES))

        if "encoding" in cfg and isinstance(cfg["encoding"], str) and cfg["encoding"].strip():
            s = replace(s, encoding=cfg["encoding"].strip())

        if "strict_quoting" in cfg:
            s = replace(s, strict_quoting=_bool(cfg["strict_quoting"]))

        if "skip_blank_rows" in cfg:
            s = replace(s, skip_blank_rows=_bool(cfg["skip_blank_rows"]))

        return s

    @classmethod
    def from_env(
        cls, base: ParserSettings | None = None, prefix: str = "NLWORLD_PARSER_"
    ) -> ParserSettings:
        """
        Build ParserSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - NLWORLD_PARSER_UNKNOWN_SECTIONS ("fall_through" | "error")
            - NLWORLD_PARSER_ENCODING
            - NLWORLD_PARSER_STRICT_QUOTING (1/0/true/false/yes/no/on/off)
            - NLWORLD_PARSER_SKIP_BLANK_ROWS (1/0/true/false/yes/no/on/off)
        """
        s = base or cls()
        mapping: dict[str, Any] = {}
        for key in ("unknown_sections", "encoding", "strict_quoting", "skip_blank_rows"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v
        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> ParserSettings:
        """
        Build ParserSettings from a TOML file.

        Search order when `path` is None:
            1) ./nlworld.toml (with either a [parser] table or top-level keys)
            2) ./pyproject.toml under [tool.nlworld.parser]

        Returns defaults if no file is present.
        """
        s = cls()

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "nlworld.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            try:
                with p.open("rb") as fh:
                    data = tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logger.warning("skipping unreadable config %s: %s", p, exc)
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("nlworld", {}).get("parser") if isinstance(tool, dict) else None
            elif isinstance(data.get("parser"), dict):
                cfg = data["parser"]
            else:
                cfg = data
            if cfg:
                logger.debug("loaded parser settings from %s", p)
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> ParserSettings:
        """
        Load ParserSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (nlworld.toml, pyproject.toml).
        """
        s = cls.from_toml(path)
        return cls.from_env(base=s)
