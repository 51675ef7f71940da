# SPDX-License-Identifier: Apache-2.0
#
# Copyright (C) 2026, Arm Limited and contributors.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may
# not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
"""
Symbol maps emitted by JIT runtimes such as V8.

Each line of a symbol map describes one range of generated code::

    0x58f00097e0 0x4c8 JS:~initialize ./JetStreamDriver.js:373:21

The fields are the start address in hexadecimal, the length in hexadecimal or
decimal, and the name, which runs until the end of the line and can contain
spaces. Lines that don't follow that structure are ignored.
"""

import collections
import re
from operator import attrgetter

import pandas as pd

from jitmap.utils import Loggable


# Same set as C's isspace(). Other unicode whitespace is part of tokens.
_WHITESPACE = ' \t\n\v\f\r'
_TOKEN_REGEX = re.compile(r'[^ \t\n\v\f\r]+')
_HEX_REGEX = re.compile(r'0[xX][0-9a-fA-F]+')
_DEC_REGEX = re.compile(r'[0-9]+')
_UINT64_MAX = 2 ** 64 - 1


class SymbolEntry(collections.namedtuple('SymbolEntry', ('addr', 'len', 'name'))):
    """
    Range of code described by one line of a symbol map.

    :param addr: Start address of the range.
    :type addr: int

    :param len: Length in bytes of the range. Can be 0.
    :type len: int

    :param name: Name of the symbol, without surrounding whitespace.
    :type name: str

    ``str()`` gives back the line that describes the entry in a symbol map.
    """
    __slots__ = ()

    @property
    def end(self):
        """
        Address right after the end of the range.
        """
        return self.addr + self.len

    def __str__(self):
        return f'0x{self.addr:x} 0x{self.len:x} {self.name}'


def _consume_token(text):
    """
    Split the first whitespace-delimited token off ``text``.

    :returns: A tuple ``(token, rest)`` where ``rest`` has no leading
        whitespace. ``token`` is ``None`` if ``text`` is empty.
    """
    match = _TOKEN_REGEX.match(text)
    if match is None:
        return (None, text)
    else:
        return (match.group(), text[match.end():].lstrip(_WHITESPACE))


def _parse_uint(token, decimal):
    if _HEX_REGEX.fullmatch(token):
        value = int(token[2:], base=16)
    elif decimal and _DEC_REGEX.fullmatch(token):
        value = int(token, base=10)
    else:
        return None

    if value > _UINT64_MAX:
        return None
    return value


class SymbolMapParser(Loggable):
    """
    Parser for the symbol maps emitted by JIT runtimes.

    The parser is lenient: symbol maps are produced by third party runtimes
    and can contain comments or truncated lines. Any line that cannot be
    parsed is skipped and no error is ever reported for the content itself.
    """

    @staticmethod
    def parse_line(line):
        """
        Parse a single line of a symbol map.

        :param line: Line to parse, with or without its line terminator.
        :type line: str

        :returns: A :class:`SymbolEntry`, or ``None`` if the line must be
            skipped.
        """
        line = line.lstrip(_WHITESPACE)
        if not line:
            return None

        token, rest = _consume_token(line)
        addr = _parse_uint(token, decimal=False)
        if addr is None:
            return None

        token, rest = _consume_token(rest)
        # A length glued to the name like "0x50five" is rejected here, since
        # the whole token has to be a number.
        if token is None:
            return None
        size = _parse_uint(token, decimal=True)
        if size is None:
            return None

        name = rest.rstrip(_WHITESPACE)
        if not name:
            return None

        return SymbolEntry(addr=addr, len=size, name=name)

    @classmethod
    def parse(cls, content):
        """
        Parse the content of a symbol map.

        :param content: Full text of the symbol map.
        :type content: str

        :returns: A list of :class:`SymbolEntry` sorted by address. Entries
            sharing the same address are kept in the order they appear in
            ``content``.
        """
        if not isinstance(content, str):
            raise TypeError(f'Symbol map content must be a str, not {content.__class__.__qualname__}')

        symbols = []
        skipped = 0
        for line in content.split('\n'):
            entry = cls.parse_line(line)
            if entry is not None:
                symbols.append(entry)
            elif line.strip(_WHITESPACE):
                skipped += 1

        cls.get_logger().debug(f'Parsed {len(symbols)} symbols, ignored {skipped} malformed lines')

        # sorted() is stable, so duplicated addresses keep their order
        return sorted(symbols, key=attrgetter('addr'))


def parse_symbol_map(content):
    """
    Parse the content of a symbol map.

    Shorthand for :meth:`SymbolMapParser.parse`.
    """
    return SymbolMapParser.parse(content)


def format_symbol_map(entries):
    """
    Format entries as the content of a symbol map.

    :param entries: Entries to format, written in the given order.
    :type entries: collections.abc.Iterable(SymbolEntry)

    Well-formed entries parse back to equal entries with
    :func:`parse_symbol_map`.
    """
    return ''.join(
        f'{entry}\n'
        for entry in entries
    )


def symbol_map_df(entries):
    """
    Build a :class:`pandas.DataFrame` out of symbol map entries.

    :param entries: Entries to use as rows, in the given order.
    :type entries: collections.abc.Iterable(SymbolEntry)

    The dataframe has ``addr`` and ``len`` columns of ``uint64`` dtype and a
    ``name`` column of strings.
    """
    entries = list(entries)
    return pd.DataFrame({
        'addr': pd.Series([entry.addr for entry in entries], dtype='uint64'),
        'len': pd.Series([entry.len for entry in entries], dtype='uint64'),
        'name': pd.Series([entry.name for entry in entries], dtype='object'),
    })

# vim :set tabstop=4 shiftwidth=4 textwidth=80 expandtab
