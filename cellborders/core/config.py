"""Define a configuration class for cellborders."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import fastjsonschema
from platformdirs import user_config_dir

from cellborders.core import __app_name__, __copyright__, __version__

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from typing import Any, ClassVar


log = logging.getLogger(__name__)

_SCHEMA_TYPES: dict[Callable[[Any], Any], str] = {
    bool: "boolean",
    str: "string",
    int: "integer",
    float: "number",
    Path: "string",
}


class Setting:
    """A single configuration item."""

    def __init__(
        self,
        name: str,
        default: Any = None,
        help_: str = "",
        type_: Callable[[Any], Any] | None = None,
        choices: list[Any] | None = None,
        flags: list[str] | None = None,
        nargs: str | None = None,
        schema: dict[str, Any] | None = None,
        description: str = "",
    ) -> None:
        """Create a new configuration item.

        Args:
            name: The name of the setting
            default: The value used when the setting is not configured
            help_: A short help message for the command line
            type_: Converts command line values to the setting's type
            choices: The permitted values
            flags: The command line flags for the setting
            nargs: The number of command line arguments the setting takes
            schema: Additional JSON schema rules for the setting's value
            description: A longer description of the setting

        """
        self.name = name
        self.default = default
        self.help = help_
        self.type = type_ or type(default)
        self.choices = choices
        self.flags = flags or [f"--{name.replace('_', '-')}"]
        self.nargs = nargs
        self._schema = {"type": _SCHEMA_TYPES.get(self.type), **(schema or {})}
        self.description = description

    @property
    def schema(self) -> dict[str, Any]:
        """Return a json schema property for the config item."""
        schema = {"description": self.help, **self._schema}
        if self.choices:
            schema["enum"] = self.choices
        return schema

    def add_to_parser(self, parser: argparse.ArgumentParser) -> None:
        """Add a command line argument for the setting to a parser."""
        kwargs: dict[str, Any] = {"help": self.help, "type": self.type}
        if self.nargs:
            kwargs["nargs"] = self.nargs
        if self.choices:
            kwargs["choices"] = self.choices
        parser.add_argument(*self.flags, **kwargs)

    def __repr__(self) -> str:
        """Represent a :py:class`Setting` instance as a string."""
        return f"<Setting {self.name}: {self.type}>"


class Config:
    """A configuration store.

    Values are taken from the settings' defaults, then the user's configuration
    file, then the command line. Values which do not match a setting's schema are
    logged and ignored.
    """

    _conf_file_name = "config.json"
    _settings: ClassVar[dict[str, Setting]] = {}

    def __init__(self, _help: str = "", **kwargs: Any) -> None:
        """Create a new configuration object instance."""
        self._help = _help
        self._config_file_path = (
            Path(user_config_dir(__app_name__, appauthor=None)) / self._conf_file_name
        )
        self._schema_validate = fastjsonschema.compile(self._schema, use_default=False)
        self._values = {
            **{name: setting.default for name, setting in self._settings.items()},
            **kwargs,
        }

    def load(self, args: Sequence[str] | None = None) -> None:
        """Load the configuration file and command line arguments.

        Args:
            args: Command line arguments to parse instead of :py:data:`sys.argv`

        """
        from cellborders.core.log import setup_logs

        try:
            self._values.update(self._validate(self._load_user(), "config file"))
            self._values.update(
                self._validate(self._load_args(args), "command line parameter")
            )
        finally:
            # Set-up logs even if configuration validation fails
            setup_logs(self)

    @property
    def _schema(self) -> dict[str, Any]:
        """Return a JSON schema for the config."""
        return {
            "title": "Cellborders Configuration",
            "type": "object",
            "properties": {name: item.schema for name, item in self._settings.items()},
        }

    def _validate(self, data: dict[str, Any], group: str) -> dict[str, Any]:
        """Validate settings values, dropping those which are invalid."""
        validated = {}
        for name, value in data.items():
            if name not in self._settings:
                log.warning(
                    "Configuration option '%s' not recognised in %s", name, group
                )
                continue
            # Convert to json and back to attain json types
            json_data = json.loads(json.dumps({name: value}, default=str))
            try:
                self._schema_validate(json_data)
            except fastjsonschema.JsonSchemaValueException as error:
                log.warning(
                    "Error in %s setting: `%s = %r`\n%s",
                    group,
                    name,
                    value,
                    error.message.replace("data.", ""),
                )
            else:
                validated[name] = value
        return validated

    def _load_parser(self) -> argparse.ArgumentParser:
        """Construct an :py:class:`ArgumentParser`."""
        parser = argparse.ArgumentParser(
            prog=__app_name__,
            description=self._help,
            epilog=__copyright__,
            argument_default=argparse.SUPPRESS,
        )
        parser.add_argument(
            "--version", "-V", action="version", version=f"%(prog)s {__version__}"
        )
        for setting in self._settings.values():
            setting.add_to_parser(parser)
        return parser

    def _load_args(self, args: Sequence[str] | None = None) -> dict[str, Any]:
        """Load configuration settings from command line arguments."""
        namespace, _remainder = self._load_parser().parse_known_intermixed_args(args)
        # Absent optional positionals can be stored as the suppression sentinel
        return {
            name: value
            for name, value in vars(namespace).items()
            if value is not argparse.SUPPRESS
        }

    def _load_user(self) -> dict[str, Any]:
        """Load configuration settings from the user's JSON configuration file."""
        path = self._config_file_path
        if not path.exists():
            return {}
        with path.open() as f:
            try:
                data = json.load(f)
            except json.decoder.JSONDecodeError:
                data = None
        if not isinstance(data, dict):
            log.error("Could not parse the configuration file: %s", path)
            return {}
        return data

    def __getattr__(self, name: str) -> Any:
        """Enable access of config elements via dotted attributes."""
        values = self.__dict__.get("_values", {})
        if name in values:
            return values[name]
        raise AttributeError(name)

    @classmethod
    def add_setting(cls, name: str, *args: Any, **kwargs: Any) -> None:
        """Register a new config item."""
        cls._settings[name] = Setting(name, *args, **kwargs)


add_setting = Config.add_setting
