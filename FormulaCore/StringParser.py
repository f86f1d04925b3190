# StringParser.py
"""
String helpers used by the tree builder.

All helpers work on whole substrings: they never tokenize, they only cut a
call like "add(2, multiply(3, 4))" into its keyword and its parameter texts.
"""

from . import error as E


def extract_keyword(text):
    """Return the function name in front of the first '(' (e.g. "add(2, 3)" -> "add")."""
    open_index = text.find('(')
    if open_index == -1:
        raise E.MissingOpenParenError(text)

    keyword = text[:open_index].strip()
    if not keyword:
        raise E.EmptyKeywordError(text)

    return keyword


def extract_parameter_content(text):
    """Return the text between the first '(' and the last ')' (e.g. "add(2, 3)" -> "2, 3")."""
    open_index = text.find('(')
    close_index = text.rfind(')')

    if open_index == -1:
        raise E.MissingOpenParenError(text)
    if close_index == -1:
        raise E.MissingCloseParenError(text)
    if close_index < open_index:
        raise E.MismatchedParenError(text)

    return text[open_index + 1:close_index].strip()


def split_parameters(content):
    """Split parameter text on the commas that are not inside a nested call.

    "2, multiply(3, 4)" -> ["2", "multiply(3, 4)"]
    Empty content means a call without parameters and gives [].
    """
    if not content.strip():
        return []

    parameters = []
    current = []
    depth = 0

    for char in content:
        if char == '(':
            depth += 1
        elif char == ')':
            depth -= 1
            if depth < 0:
                raise E.TooManyCloseParenError()
        elif char == ',' and depth == 0:
            # Separator on our own nesting level
            parameters.append(''.join(current).strip())
            current = []
            continue
        current.append(char)

    if depth != 0:
        raise E.UnclosedParenError()

    parameters.append(''.join(current).strip())
    return parameters


def validate_parameter_count(keyword, expected, actual):
    if expected != actual:
        raise E.ParameterCountError(keyword, expected, actual)
