"""File name patterns for outputs and mask images, and capture time intervals."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

_INPUT_ONLY = re.compile(r"%(?:i[fFdn]\[(-?[0-9]+)\]|%)")
_WITH_OUTPUT = re.compile(r"%(?:o[fd]|i[fFdn]\[(-?[0-9]+)\]|%)")


class FileNameManipulator:
    """Answers questions about a sorted list of input file names.

    Indices may be negative to count from the end; an index outside the
    list yields an empty string.
    """

    def __init__(self, names: Iterable[str]) -> None:
        self._names = sorted(names)

    def _name_at(self, index: int) -> str | None:
        if index < 0:
            index += len(self._names)
        if 0 <= index < len(self._names):
            return self._names[index]
        return None

    def input_base_name(self, index: int) -> str:
        """File name of input ``index``, without its directory."""
        name = self._name_at(index)
        return "" if name is None else self.base_name(name)

    def input_base_name_no_ext(self, index: int) -> str:
        """File name of input ``index`` without directory and extension."""
        name = self.input_base_name(index)
        dot = name.rfind(".")
        return name if dot < 0 else name[:dot]

    def input_dir_name(self, index: int) -> str:
        """Canonical directory of input ``index``."""
        name = self._name_at(index)
        return "" if name is None else self.dir_name(name)

    def input_number_suffix(self, index: int) -> str:
        """Trailing digits of the extensionless file name of input ``index``."""
        name = self.input_base_name_no_ext(index)
        match = re.search(r"[0-9]*\Z", name)
        return match.group(0) if match else ""

    @staticmethod
    def base_name(name: str) -> str:
        """Last component of a path."""
        return os.path.basename(name)

    @staticmethod
    def dir_name(name: str) -> str:
        """Canonical directory of an existing file, or an empty string."""
        if not os.path.exists(name):
            return ""
        return os.path.dirname(os.path.realpath(name))


def replace_arguments(
    pattern: str, out_file_name: str, input_names: Iterable[str]
) -> str:
    """Expand the ``%`` tokens of ``pattern``.

    ``%if[n]``, ``%iF[n]``, ``%id[n]`` and ``%in[n]`` refer to input ``n``;
    ``%of`` and ``%od`` to the output file, only when one is given; ``%%``
    stands for a single ``%``.
    """
    regex = _INPUT_ONLY if out_file_name == "" else _WITH_OUTPUT
    fnm = FileNameManipulator(input_names)
    result = pattern
    index = 0
    while (match := regex.search(result, index)) is not None:
        token = match.group(0)
        kind = token[1]
        if kind == "%":
            replacement = "%"
        elif kind == "o":
            if token[2] == "f":
                replacement = fnm.base_name(out_file_name)
            else:
                replacement = fnm.dir_name(out_file_name)
        else:
            image_index = int(match.group(1))
            replacement = {
                "f": fnm.input_base_name,
                "F": fnm.input_base_name_no_ext,
                "d": fnm.input_dir_name,
                "n": fnm.input_number_suffix,
            }[token[2]](image_index)
        result = result[: match.start()] + replacement + result[match.end():]
        index = match.start() + 1
    return result


def build_output_file_name(input_names: Iterable[str]) -> str:
    """Default output name, next to the last input."""
    names = list(input_names)
    if len(names) > 1:
        return replace_arguments("%id[-1]/%iF[0]-%in[-1].dng", "", names)
    return replace_arguments("%id[-1]/%iF[0].dng", "", names)


@dataclass
class DateInterval:
    """The time span during which an exposure was taken."""

    start: datetime
    end: datetime

    def __lt__(self, other: DateInterval) -> bool:
        return self.start < other.start

    def difference(self, other: DateInterval) -> float:
        """Seconds from the end of this interval to the start of ``other``."""
        return (other.start - self.end).total_seconds()