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

"""os-release errors."""
import dataclasses
import pathlib
from typing import Iterable, Optional, Tuple


@dataclasses.dataclass
class OsReleaseError(Exception):
    """Unexpected error.

    :param brief: Brief description of error.
    :param details: Detailed information.
    :param resolution: Recommendation, if any.
    """

    brief: str
    details: Optional[str] = None
    resolution: Optional[str] = None

    def __str__(self) -> str:
        parts = [self.brief]

        if self.details:
            parts.append(self.details)

        if self.resolution:
            parts.append(self.resolution)

        return "\n".join(parts)


class OsReleaseNotFoundError(OsReleaseError):
    """None of the candidate os-release files could be opened.

    :param paths: Paths that were tried, in order.
    """

    def __init__(self, paths: Iterable[pathlib.Path]) -> None:
        self.paths: Tuple[pathlib.Path, ...] = tuple(paths)

        brief = "Unable to find an os-release file."
        details = "\n".join(f"* Unable to open: {p.as_posix()!r}" for p in self.paths)
        resolution = (
            "Ensure the host provides /etc/os-release or /usr/lib/os-release, "
            "or pass the path of an os-release file explicitly."
        )
        super().__init__(brief=brief, details=details or None, resolution=resolution)


class OsReleaseReadError(OsReleaseError):
    """An os-release file exists but could not be read.

    :param path: Path of the file.
    :param reason: Reason for the failure.
    """

    def __init__(self, path: pathlib.Path, reason: str) -> None:
        self.path = path
        self.reason = reason

        brief = f"Failed to read os-release file at {path.as_posix()!r}."
        super().__init__(brief=brief, details=reason)
