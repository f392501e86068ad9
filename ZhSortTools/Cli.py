####################################################################################################
#
# zhsort - Chinese aware sorting of text labels
# Copyright (C) 2025 Fabrice SALVAIRE
# SPDX-License-Identifier: GPL-3.0-or-later
#
####################################################################################################

__all__ = ['Cli']

####################################################################################################

from dataclasses import replace
from pathlib import Path
from typing import Iterable
import inspect
import os
import re
import shlex
import traceback

# Python Prompt Toolkit](https://python-prompt-toolkit.readthedocs.io/en/master/)
from prompt_toolkit import PromptSession
from prompt_toolkit import shortcuts
from prompt_toolkit.completion import Completer, Completion, CompleteEvent
from prompt_toolkit.document import Document
from prompt_toolkit.history import FileHistory

from . import config
from .classifier import classify
from .collation import CollationError, CollationService
from .options import ChineseVariant, ConfigError, NumeralPolicy, SortOptions, UpperCaseOrder
from .printer import CATEGORY_COLOURS, STYLE, printc, html_escape, CommandError
from .sorter import sort_zh

####################################################################################################

LINESEP = os.linesep

type CommandName = str
type LabelText = str
type VariantName = str
type PolicyName = str
type OrderName = str
type FilePath = str   # aka Path

####################################################################################################

class CustomCompleter(Completer):

    """Complete the command names, then the parameters according to their type."""

    ##############################################

    def __init__(self, commands: list[str]) -> None:
        self._commands = commands

    ##############################################

    @staticmethod
    def _parameter_type(command: str, position: int) -> str | None:
        try:
            func = getattr(Cli, command)
        except AttributeError:
            return None
        parameters = list(inspect.signature(func).parameters.values())[1:]   # 0 is self
        if not parameters:
            return None
        if position >= len(parameters):
            if parameters[-1].kind != inspect.Parameter.VAR_POSITIONAL:
                return None
            position = -1
        return parameters[position].annotation.__name__

    ##############################################

    def get_completions(
            self,
            document: Document,
            complete_event: CompleteEvent,
    ) -> Iterable[Completion]:
        line = document.text_before_cursor
        # only complete the last command
        line = line.split(';')[-1].lstrip()
        # remove multiple spaces
        line = re.sub(' +', ' ', line)
        number_of_parameters = line.count(' ')
        index = line.rfind(' ')
        word_before_cursor = line[index+1:]
        if number_of_parameters:
            command = line[:line.find(' ')]
            match self._parameter_type(command, number_of_parameters - 1):
                case 'bool':
                    words = ('true', 'false')
                case 'CommandName':
                    words = self._commands
                case 'VariantName':
                    words = [_.value for _ in ChineseVariant]
                case 'PolicyName':
                    words = [_.value for _ in NumeralPolicy]
                case 'OrderName':
                    words = [_.value for _ in UpperCaseOrder]
                case 'FilePath':
                    words = [_.name for _ in sorted(Path().cwd().glob('*.txt'))]
                case _:
                    words = ()
        else:
            words = self._commands
        for _ in words:
            if _.startswith(word_before_cursor):
                yield Completion(
                    text=_,
                    start_position=-len(word_before_cursor),
                )

####################################################################################################

class Cli:

    ##############################################

    @staticmethod
    def _to_bool(value: str) -> bool:
        if isinstance(value, bool):
            return value
        match str(value).lower():
            case 'true' | 't' | 'yes' | 'on' | '1':
                return True
            case _:
                return False

    ############################################################################

    def __init__(self, options: SortOptions = None) -> None:
        self._options = options or SortOptions()
        self.COMMANDS = [
            _
            for _ in dir(self)
            if not (_.startswith('_') or _[0].isupper() or _ in ('cli', 'run', 'print'))
        ]
        self.COMMANDS.sort()
        self._completer = CustomCompleter(self.COMMANDS)

    ##############################################

    def _run_line(self, query: str) -> bool:
        try:
            command, *argument = shlex.split(query)
        except ValueError as e:
            self.print(f"<red>Invalid command</red> <blue>{html_escape(query)}</blue>: {e}")
            return True
        try:
            if command == 'quit':
                return False
            method = getattr(self, command)
        except AttributeError:
            self.print(f"<red>Invalid command</red> <blue>{html_escape(query)}</blue>")
            self.usage()
            return True
        try:
            method(*argument)
        except KeyboardInterrupt:
            self.print(f"{LINESEP}<red>Interrupted</red>")
        except CollationError as e:
            self.print(f'Collation error: <red>{html_escape(str(e))}</red>')
        except ConfigError as e:
            self.print(f'<red>{html_escape(str(e))}</red>')
        except CommandError as e:
            self.print(str(e))
        except Exception as e:
            print(traceback.format_exc())
            print(e)
        return True

    ##############################################

    def run(self, query: str) -> bool:
        commands = filter(bool, [_.strip() for _ in query.split(';')])
        for _ in commands:
            if not self._run_line(_):
                return False
        return True

    ##############################################

    def cli(self, query: str = '') -> None:
        if query:
            if not self.run(query):
                return

        config.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
        history = FileHistory(config.CLI_HISTORY_PATH)
        session = PromptSession(
            completer=self._completer,
            history=history,
        )
        self.usage()
        while True:
            try:
                message = [
                    ('class:prompt', '> '),
                ]
                query = session.prompt(
                    message,
                    style=STYLE,
                )
            except EOFError:
                break
            else:
                if query:
                    if not self.run(query):
                        break
                else:
                    self.usage()

    ##############################################

    def print(self, message: str = '') -> None:
        printc(message)

    ############################################################################

    def clear(self) -> None:
        """Clear the console"""
        shortcuts.clear()

    ############################################################################
    #
    # Help
    #

    def usage(self) -> None:
        """Show usage"""
        for _ in (
            "<red>Enter</red>: <blue>command argument</blue>",
            "    or <blue>command1 argument; command2 argument; ...</blue>",
            "<red>Commands are</red>: " + ', '.join([f"<blue>{_}</blue>" for _ in self.COMMANDS]),
            "use <blue>help</blue> <green>command</green> to get help",
            "use quotes for labels with spaces",
            "use <green>tab</green> key to complete",
            "use <green>up/down</green> key to navigate history",
            "<red>Exit</red> using command <blue>quit</blue> or <blue>Ctrl+d</blue>"
        ):
            self.print(_)

    ##############################################

    def _help(self, command: CommandName = None, show_parameters: bool = False) -> None:
        func = getattr(self, command)
        self.print(f'<green>{command:16}</green> <blue>{func.__doc__ or ''}</blue>')
        if show_parameters:
            signature = inspect.signature(func)
            for _ in signature.parameters.values():
                if _.default != inspect._empty:
                    default = f' = <orange>{_.default}</orange>'
                else:
                    default = ''
                star = '*' if _.kind == inspect.Parameter.VAR_POSITIONAL else ''
                self.print(f'  <blue>{star}{_.name}</blue>: <green>{_.annotation.__name__}</green>{default}')

    def help(self, command: CommandName = None) -> None:
        """Show command help"""
        if command is None:
            for command in self.COMMANDS:
                self._help(command)
        else:
            if command not in self.COMMANDS:
                raise CommandError(f"<red>Unknown command</red> <blue>{html_escape(command)}</blue>")
            self._help(command, show_parameters=True)

    ############################################################################
    #
    # Options
    #

    def options(self) -> None:
        """Show the sort options"""
        self.print(f"<red>Options</red> <blue>{html_escape(str(self._options))}</blue>")

    ##############################################

    def variant(self, name: VariantName) -> None:
        """Set the Chinese variant: traditional or simplified"""
        self._options = replace(self._options, variant=SortOptions.from_names(variant=name).variant)
        self.options()

    ##############################################

    def policy(self, name: PolicyName, order: OrderName = None) -> None:
        """Set the numeral policy: collation, value or value-case [upper-first|lower-first]"""
        _ = SortOptions.from_names(
            numeral_policy=name,
            upper_case_order=order or self._options.upper_case_order.value,
        )
        self._options = replace(
            self._options,
            numeral_policy=_.numeral_policy,
            upper_case_order=_.upper_case_order,
        )
        self.options()

    ##############################################

    def prefix(self, value: bool) -> None:
        """Sort a label starting with a numeral by its value"""
        self._options = replace(self._options, numeral_prefix=self._to_bool(value))
        self.options()

    ############################################################################
    #
    # Sort
    #

    def _print_labels(self, labels: list[str]) -> None:
        for _ in labels:
            self.print(f"  <green>{html_escape(_)}</green>")

    ##############################################

    def sort(self, *labels: LabelText) -> None:
        """Sort labels"""
        if not labels:
            raise CommandError("<red>No label to sort</red>")
        self._print_labels(sort_zh(labels, self._options))

    ##############################################

    def sort_file(self, path: FilePath) -> None:
        """Sort the lines of a file"""
        path = Path(path)
        if not path.exists():
            raise CommandError(f"<red>File <green>{html_escape(str(path))}</green> not found</red>")
        labels = path.read_text(encoding='utf8').splitlines()
        self._print_labels(sort_zh(labels, self._options))

    ##############################################

    def classify(self, *labels: LabelText) -> None:
        """Show the bucket of each label"""
        for _ in classify(labels, self._options).labels:
            colour = CATEGORY_COLOURS[_.category]
            self.print(f"  <{colour}>{html_escape(_.text):20}</{colour}> {_.category.value:15} {html_escape(str(_.key))}")

    ##############################################

    def compare(self, a: LabelText, b: LabelText) -> None:
        """Compare two words using the collator"""
        collator = CollationService.for_variant(self._options.variant)
        result = collator.compare(a, b)
        if result < 0:
            _ = '&lt;'
        elif result > 0:
            _ = '&gt;'
        else:
            _ = '='
        self.print(f"<green>{html_escape(a)}</green> {_} <green>{html_escape(b)}</green> @{collator.locale}")
