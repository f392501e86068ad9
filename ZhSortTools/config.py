####################################################################################################
#
# zhsort - Chinese aware sorting of text labels
# Copyright (C) 2025 Fabrice SALVAIRE
# SPDX-License-Identifier: GPL-3.0-or-later
#
####################################################################################################

__all__ = [
    'CONFIG_PATH',
    'CONFIG_YAML_PATH',
    'CLI_HISTORY_PATH',
    'DEBUG',
    'Config',
    'load_config',
]

####################################################################################################

from dataclasses import dataclass
from pathlib import Path

from yaml import load
from yaml import Loader

from .options import ConfigError, SortOptions

####################################################################################################

CONFIG_PATH = Path('~/.config/zhsort').expanduser()
CONFIG_YAML_PATH = CONFIG_PATH.joinpath('config.yaml')
CLI_HISTORY_PATH = CONFIG_PATH.joinpath('cli_history')

DEBUG = False

####################################################################################################

@dataclass
class Config:
    VARIANT: str = 'traditional'
    NUMERAL_POLICY: str = 'collation'
    UPPER_CASE_ORDER: str = 'lower-first'
    NUMERAL_PREFIX: bool = False

    ##############################################

    def sort_options(self) -> SortOptions:
        return SortOptions.from_names(
            variant=self.VARIANT,
            numeral_policy=self.NUMERAL_POLICY,
            upper_case_order=self.UPPER_CASE_ORDER,
            numeral_prefix=self.NUMERAL_PREFIX,
        )

####################################################################################################

def load_config(path: Path | str = CONFIG_YAML_PATH) -> Config:
    path = Path(path)
    if not path.exists():
        return Config()
    with open(path) as fh:
        _ = load(fh, Loader=Loader)
    if _ is None:
        return Config()
    if not isinstance(_, dict):
        raise ConfigError(f"Invalid config file {path}")
    config = Config(**_)
    # check values
    config.sort_options()
    return config
