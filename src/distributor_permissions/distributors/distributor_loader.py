"""YAML-based distributor configuration loader.

DistributorLoader reads distributor definitions and builds an ordered
tuple of :class:`Distributor` instances. The order of the ``distributors``
list is the submission order used by the aggregator and the report.

Schema
------
::

    version: "1.0"
    distributors:
      - name: "DISTRIBUTOR1"
        include: ["IN", "US"]
        exclude: ["KARNATAKA-IN", "CHENNAI-TAMILNADU-IN"]
      - name: "DISTRIBUTOR2"
        include: ["IN"]
        exclude: ["TAMILNADU-IN"]
      - name: "CITY-LIST"
        type: "exact"
        include: ["HUBLI-KARNATAKA-IN"]

Example
-------
::

    loader = DistributorLoader()
    distributors = loader.load("distributors.yaml")
    print([d.name for d in distributors])
"""
from __future__ import annotations

import logging
from pathlib import Path

import yaml

from distributor_permissions.distributors.distributor import Distributor

logger = logging.getLogger(__name__)

_SUPPORTED_VERSIONS: frozenset[str] = frozenset(["1.0", "1"])


class DistributorConfigError(ValueError):
    """Raised when a distributor config is malformed or invalid.

    Attributes
    ----------
    config_path:
        The path to the config file that caused the error, if known.
    """

    def __init__(self, message: str, config_path: str | None = None) -> None:
        self.config_path = config_path
        prefix = f"[{config_path}] " if config_path else ""
        super().__init__(f"{prefix}{message}")


class DistributorLoader:
    """Loads distributor definitions from YAML files, strings or dicts.

    Parameters
    ----------
    strict:
        When ``True``, unknown top-level keys are treated as an error.
        Default ``False`` (unknown keys are ignored).
    """

    _KNOWN_TOP_KEYS: frozenset[str] = frozenset(
        ["version", "distributors", "metadata", "description"]
    )

    def __init__(self, strict: bool = False) -> None:
        self._strict = strict

    def load(self, config_path: str | Path) -> tuple[Distributor, ...]:
        """Load distributors from a YAML file on disk.

        Raises
        ------
        DistributorConfigError
            If the file cannot be parsed or is structurally invalid.
        FileNotFoundError
            If the config file does not exist.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Distributor config not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as fh:
                raw: dict[str, object] = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise DistributorConfigError(
                f"Failed to parse YAML: {exc}", str(config_path)
            ) from exc

        return self._build(raw, config_path=str(config_path))

    def load_from_dict(
        self,
        config: dict[str, object],
        config_path: str | None = None,
    ) -> tuple[Distributor, ...]:
        """Load distributors from an already-parsed config dictionary."""
        return self._build(config, config_path=config_path)

    def load_from_yaml_string(
        self,
        yaml_string: str,
        config_path: str | None = None,
    ) -> tuple[Distributor, ...]:
        """Load distributors from a YAML string."""
        try:
            raw: dict[str, object] = yaml.safe_load(yaml_string) or {}
        except yaml.YAMLError as exc:
            raise DistributorConfigError(
                f"Failed to parse YAML string: {exc}", config_path
            ) from exc
        return self._build(raw, config_path=config_path)

    def load_from_entries(
        self,
        entries: list[dict[str, object]],
        config_path: str | None = None,
    ) -> tuple[Distributor, ...]:
        """Build distributors from a bare list of entry dictionaries."""
        return self._build({"distributors": entries}, config_path=config_path)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _build(
        self,
        raw: dict[str, object],
        config_path: str | None = None,
    ) -> tuple[Distributor, ...]:
        self._validate_structure(raw, config_path)

        version = str(raw.get("version", "1.0"))
        if version not in _SUPPORTED_VERSIONS:
            raise DistributorConfigError(
                f"Unsupported config version {version!r}. "
                f"Supported: {sorted(_SUPPORTED_VERSIONS)}.",
                config_path,
            )

        raw_entries: list[object] = list(raw["distributors"])  # type: ignore[call-overload]
        distributors: list[Distributor] = []
        for index, entry in enumerate(raw_entries):
            if not isinstance(entry, dict):
                raise DistributorConfigError(
                    f"Distributor at index {index} must be a mapping.", config_path
                )
            try:
                distributors.append(Distributor.from_dict(entry))
            except (ValueError, TypeError) as exc:
                raise DistributorConfigError(
                    f"Error in distributor at index {index}: {exc}",
                    config_path,
                ) from exc

        names = [d.name for d in distributors]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            logger.warning("Duplicate distributor names: %s", ", ".join(duplicates))

        logger.info(
            "Loaded %d distributors from %s",
            len(distributors),
            config_path or "<dict>",
        )
        return tuple(distributors)

    def _validate_structure(
        self,
        raw: dict[str, object],
        config_path: str | None,
    ) -> None:
        if not isinstance(raw, dict):
            raise DistributorConfigError(
                "Distributor config must be a YAML mapping (dict).", config_path
            )

        if "distributors" not in raw:
            raise DistributorConfigError(
                "Distributor config must contain a 'distributors' list.", config_path
            )

        if not isinstance(raw["distributors"], list):
            raise DistributorConfigError(
                "Distributor config 'distributors' must be a list.", config_path
            )

        if self._strict:
            unknown_keys = set(raw.keys()) - self._KNOWN_TOP_KEYS
            if unknown_keys:
                raise DistributorConfigError(
                    f"Unknown top-level keys: {sorted(unknown_keys)}. "
                    f"Known keys: {sorted(self._KNOWN_TOP_KEYS)}.",
                    config_path,
                )
