####################################################################################################
#
# zhsort - Chinese aware sorting of text labels
# Copyright (C) 2025 Fabrice SALVAIRE
# SPDX-License-Identifier: GPL-3.0-or-later
#
####################################################################################################

__all__ = ['html_escape', 'printc', 'pt_print', 'STYLE', 'CATEGORY_COLOURS', 'CommandError']

####################################################################################################

import html

from prompt_toolkit import HTML
from prompt_toolkit import print_formatted_text
from prompt_toolkit.styles import Style

from .classifier import Category

####################################################################################################

STYLE = Style.from_dict({
    # User input (default text)
    '': '#ffffff',
    # Prompt
    'prompt': '#ff0000',
    # Output
    'red': '#ed1414',
    'green': '#10cf15',
    'blue': '#1b99f3',
    'orange': '#f57300',
    'violet': '#9b58b5',
    'greenblue': '#19bb9c',
})

CATEGORY_COLOURS = {
    Category.ASCII_WORD: 'blue',
    Category.UPPER_NUMERAL: 'orange',
    Category.LOWER_NUMERAL: 'violet',
    Category.GENERIC_WORD: 'green',
}

####################################################################################################

def pt_print(message: str) -> None:
    message = HTML(message)
    print_formatted_text(
        message,
        style=STYLE,
    )

####################################################################################################

html_escape = html.escape

printc = pt_print

####################################################################################################

class CommandError(NameError):
    pass
