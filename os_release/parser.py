#
# Copyright 2021-2023 Canonical Ltd.
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License version 3 as published by the Free Software Foundation.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with this program; if not, write to the Free Software Foundation,
# Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301, USA.
#

"""Parser for /etc/os-release."""

import logging
from typing import Dict, Iterable, Iterator, Tuple

logger = logging.getLogger(__name__)

# Characters that a backslash escapes inside a double-quoted value.
DOUBLE_QUOTE_ESCAPES = frozenset('\\"$`\n')


def unquote_value(raw: str) -> str:
    """Strip the quoting from an os-release value.

    Values wrapped in matching double quotes have the backslash escapes for
    backslash, double quote, dollar sign, backtick and newline resolved.  Any other
    backslash is kept as is.  Values wrapped in single quotes are returned
    verbatim, without the quotes.  Unquoted values are only trimmed.

    :param raw: Value as found after the first ``=`` of a line.

    :returns: The unquoted value.
    """
    value = raw.strip()

    if len(value) < 2 or value[0] not in "\"'" or value[0] != value[-1]:
        return value

    quote, inner = value[0], value[1:-1]
    if quote == "'":
        return inner

    chars = []
    escaped = False
    for char in inner:
        if escaped:
            if char not in DOUBLE_QUOTE_ESCAPES:
                chars.append("\\")
            if char != "\n":
                chars.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        else:
            chars.append(char)

    # Trailing lone backslash.
    if escaped:
        chars.append("\\")

    return "".join(chars)


def iter_assignments(lines: Iterable[str]) -> Iterator[Tuple[str, str]]:
    """Yield the ``(key, value)`` assignments found in os-release lines.

    Blank lines and comments are ignored.  Lines without ``=``, with an empty
    key, or with whitespace inside the key are skipped.

    :param lines: Lines of an os-release file, in file order.
    """
    for lineno, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        key, eq, value = stripped.partition("=")
        if eq != "=":  # Not a variable getting set; ignore.
            logger.debug(f"Skipping line {lineno} without assignment: {line!r}")
            continue

        key = key.strip()
        if not key or any(c.isspace() for c in key):
            logger.debug(f"Skipping line {lineno} with invalid key: {line!r}")
            continue

        yield key, unquote_value(value)


def parse_os_release(content: str) -> Dict[str, str]:
    """Parser for /etc/os-release.

    Format documentation at:

    https://www.freedesktop.org/software/systemd/man/os-release.html

    :param content: String contents of os-release file.

    :returns: Dictionary of key-mappings found in os-release. Values are
    stripped of encapsulating quotes.  When a key is repeated the last
    value wins.
    """
    mappings: Dict[str, str] = {}

    for key, value in iter_assignments(content.splitlines()):
        mappings[key] = value

    return mappings
