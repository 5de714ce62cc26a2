"Contains the configuration object that can be passed to the router, as well as default values"
from io import TextIOBase
from json import loads, dumps
from typing import NamedTuple, Optional, Union


class Config(NamedTuple):
    """A config object that provides all settings that influence the router's behaviour

    Customize the values where the default won't fit you:

        >>> myconfig = Config(max_expansions=100000, unknown_road="unnamed road")
    """

    #: Routes longer than this are treated as unavailable. This value is in miles.
    max_distance: float = float("inf")
    #: Caps the number of vertices the path search expands before giving up.
    #: `None` lets the search run until the graph is exhausted.
    max_expansions: Optional[int] = None
    #: Road name used in directions for edges without a name
    unknown_road: str = "unknown road"
    #: Default radius for looking up vertices around a position. This value is in miles.
    search_radius: float = 0.1


DEFAULT_CONFIG = Config()


def load_config(source: Union[str, TextIOBase, dict]) -> Config:
    """Load config from a source

    Args:
        source:
            Either an open text file containing a JSON dict, or the path to it, or a dictionary
    Returns:
        The read Config object. Missing keys take their default value.
    """
    file_open = None
    opened_source = source
    if isinstance(opened_source, str):
        opened_source = open(source, "r")
        file_open = opened_source
    if isinstance(opened_source, TextIOBase):
        opened_source = loads(opened_source.read())
    if file_open is not None:
        file_open.close()
    if not isinstance(opened_source, dict):
        raise TypeError("Surprising type")
    unknown_keys = set(opened_source) - set(Config._fields)
    if unknown_keys:
        raise ValueError(f"Unknown config options: {sorted(unknown_keys)}")
    return Config(**opened_source)


def save_config(config: Config, dest: Optional[Union[str, TextIOBase]] = None) -> Optional[dict]:
    """Saves a config to a file or a dictionary

    Args:
        config:
            The config.
        dest:
            Either a path, or an already write-opened text file, or nothing.
    Returns:
        If no destination was given, returns the config as dictionary"""
    options = config._asdict()
    if dest is None:
        return options
    if isinstance(dest, str):
        with open(dest, "w") as filepointer:
            filepointer.write(dumps(options))
    elif isinstance(dest, TextIOBase):
        dest.write(dumps(options))
    else:
        raise TypeError("`dest` has to be a path or a writable text file")
    return None
