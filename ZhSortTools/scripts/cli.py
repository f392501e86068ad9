#! /usr/bin/env python3

####################################################################################################
#
# zhsort - Chinese aware sorting of text labels
# Copyright (C) 2025 Fabrice SALVAIRE
# SPDX-License-Identifier: GPL-3.0-or-later
#
####################################################################################################

__all__ = ['main']

####################################################################################################

from dataclasses import replace
from pathlib import Path
import argparse
import logging
import sys

from ZhSortTools.Cli import Cli
from ZhSortTools.collation import CollationError
from ZhSortTools.options import ConfigError, SortOptions
from ZhSortTools.sorter import sort_zh
from ZhSortTools import config as Config

####################################################################################################

# shortcuts for --policy
POLICIES = {
    'collation': ('collation', None),
    'value': ('value', None),
    'value-upper-first': ('value-case', 'upper-first'),
    'value-lower-first': ('value-case', 'lower-first'),
}

####################################################################################################

def make_options(args: argparse.Namespace, config: Config.Config) -> SortOptions:
    options = config.sort_options()
    if args.variant is not None:
        options = replace(options, variant=SortOptions.from_names(variant=args.variant).variant)
    if args.policy is not None:
        policy, order = POLICIES[args.policy]
        _ = SortOptions.from_names(
            numeral_policy=policy,
            upper_case_order=order or options.upper_case_order.value,
        )
        options = replace(options, numeral_policy=_.numeral_policy, upper_case_order=_.upper_case_order)
    if args.prefix:
        options = replace(options, numeral_prefix=True)
    return options

####################################################################################################

def read_labels(args: argparse.Namespace) -> list[str]:
    if args.labels:
        return args.labels
    if args.input is not None:
        return Path(args.input).read_text(encoding='utf8').splitlines()
    return sys.stdin.read().splitlines()

####################################################################################################

def main(argv: list[str] = None) -> int:
    parser = argparse.ArgumentParser(
        prog='zhsort',
        description='Sort text labels in a Chinese aware order',
        epilog='Labels are read from the command line, the input file or stdin, one per line',
    )
    parser.add_argument('--debug', action='store_true')
    parser.add_argument('--config', default=Config.CONFIG_YAML_PATH, help='YAML config file')
    parser.add_argument('--variant', choices=('traditional', 'simplified'))
    parser.add_argument('--policy', choices=tuple(POLICIES.keys()), help='Chinese numeral policy')
    parser.add_argument('--prefix', action='store_true', help='sort "十二測試" as the numeral 12')
    parser.add_argument('--interactive', action='store_true', help='start an interactive session')
    parser.add_argument('--input', help='file of labels')
    parser.add_argument('labels', nargs='*')
    args = parser.parse_args(argv)

    if args.debug:
        Config.DEBUG = True
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level)

    try:
        config = Config.load_config(args.config)
        options = make_options(args, config)
    except ConfigError as e:
        parser.error(str(e))

    if args.interactive:
        cli = Cli(options)
        cli.cli(query='')
        return 0

    try:
        labels = sort_zh(read_labels(args), options)
    except CollationError as e:
        logger = logging.getLogger('zhsort')
        if Config.DEBUG:
            logger.exception(e)
        else:
            logger.error(e)
        return 1
    for _ in labels:
        print(_)
    return 0
