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

"""Pydantic model for the contents of /etc/os-release."""

import logging
import pathlib
import types
from typing import Dict, Iterable, Mapping, Optional, Tuple

import pydantic

from .errors import OsReleaseNotFoundError, OsReleaseReadError
from .parser import iter_assignments

logger = logging.getLogger(__name__)

OS_RELEASE_FILE = pathlib.Path("/etc/os-release")
OS_RELEASE_FALLBACK_FILE = pathlib.Path("/usr/lib/os-release")
DEFAULT_PATHS = (OS_RELEASE_FILE, OS_RELEASE_FALLBACK_FILE)

# Recognized os-release keys and the OsRelease attribute each one populates.
KEY_TO_FIELD: Mapping[str, str] = types.MappingProxyType(
    {
        "ANSI_COLOR": "ansi_color",
        "BUG_REPORT_URL": "bug_report_url",
        "BUILD_ID": "build_id",
        "CPE_NAME": "cpe_name",
        "DOCUMENTATION_URL": "documentation_url",
        "HOME_URL": "home_url",
        "ID": "id",
        "ID_LIKE": "id_like",
        "LOGO": "logo",
        "NAME": "name",
        "PRETTY_NAME": "pretty_name",
        "PRIVACY_POLICY_URL": "privacy_policy_url",
        "SUPPORT_URL": "support_url",
        "VARIANT": "variant",
        "VARIANT_ID": "variant_id",
        "VERSION": "version",
        "VERSION_CODENAME": "version_codename",
        "VERSION_ID": "version_id",
    }
)


class OsRelease(pydantic.BaseModel, frozen=True, extra="forbid"):
    """Operating system identification read from an os-release file.

    Every attribute holds the unquoted value of the matching key, or None if
    the key was not set.  Keys that are not recognized are kept in ``extra``.

    :param ansi_color: ANSI color for the distribution name, e.g. "0;38;2;60;110;180".
    :param bug_report_url: URL of the distribution's bug tracker.
    :param build_id: Identifier of the system image build, e.g. "rolling".
    :param cpe_name: CPE name of the operating system.
    :param documentation_url: URL of the distribution's documentation.
    :param home_url: Homepage of the distribution.
    :param id: Lower-case identifier of the distribution, e.g. "ubuntu".
    :param id_like: Space-separated identifiers of related distributions.
    :param logo: Icon name of the distribution logo.
    :param name: Name of the distribution, e.g. "Ubuntu".
    :param pretty_name: Name for presentation to the user, including version.
    :param privacy_policy_url: URL of the distribution's privacy policy.
    :param support_url: URL of the distribution's support page.
    :param variant: Name of the variant or edition.
    :param variant_id: Lower-case identifier of the variant.
    :param version: Version of the distribution, e.g. "22.04 (Jammy Jellyfish)".
    :param version_codename: Lower-case release codename, e.g. "jammy".
    :param version_id: Lower-case version identifier, e.g. "22.04".
    :param extra: Unrecognized keys mapped to their values.
    """

    ansi_color: Optional[str] = None
    bug_report_url: Optional[str] = None
    build_id: Optional[str] = None
    cpe_name: Optional[str] = None
    documentation_url: Optional[str] = None
    home_url: Optional[str] = None
    id: Optional[str] = None
    id_like: Optional[str] = None
    logo: Optional[str] = None
    name: Optional[str] = None
    pretty_name: Optional[str] = None
    privacy_policy_url: Optional[str] = None
    support_url: Optional[str] = None
    variant: Optional[str] = None
    variant_id: Optional[str] = None
    version: Optional[str] = None
    version_codename: Optional[str] = None
    version_id: Optional[str] = None
    extra: Mapping[str, str] = pydantic.Field(
        default_factory=dict, validate_default=True
    )

    @pydantic.field_validator("extra", mode="after")
    @classmethod
    def freeze_extra(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        """Copy the unrecognized keys into a read-only mapping."""
        return types.MappingProxyType(dict(value))

    @property
    def like_ids(self) -> Tuple[str, ...]:
        """Identifiers of the distributions this one is derived from."""
        if self.id_like is None:
            return ()
        return tuple(self.id_like.split())

    def as_dict(self) -> Dict[str, str]:
        """Map every key that was set back to its os-release name.

        :returns: Dictionary of os-release keys to values.
        """
        data = {
            key: getattr(self, field)
            for key, field in KEY_TO_FIELD.items()
            if getattr(self, field) is not None
        }
        data.update(self.extra)
        return data

    def __hash__(self) -> int:
        return hash(frozenset(self.as_dict().items()))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "OsRelease":
        """Build an OsRelease from the lines of an os-release file.

        Malformed lines are skipped, so this never fails.

        :param lines: Lines of an os-release file, in file order.

        :returns: OsRelease object.
        """
        fields: Dict[str, str] = {}
        extra: Dict[str, str] = {}

        for key, value in iter_assignments(lines):
            field = KEY_TO_FIELD.get(key)
            if field is None:
                extra[key] = value
            else:
                fields[field] = value

        return cls(**fields, extra=extra)

    @classmethod
    def from_string(cls, content: str) -> "OsRelease":
        """Build an OsRelease from the contents of an os-release file.

        :param content: String contents of os-release file.

        :returns: OsRelease object.
        """
        return cls.from_lines(content.splitlines())

    @classmethod
    def load(cls, path: Optional[pathlib.Path] = None) -> "OsRelease":
        """Read and parse an os-release file.

        Without a path, OS_RELEASE_FILE is read, falling back to
        OS_RELEASE_FALLBACK_FILE if the former cannot be opened.

        :param path: Path of an os-release formatted file to read instead of the
            default locations.

        :returns: OsRelease object.

        :raises OsReleaseNotFoundError: If no candidate file can be opened.
        :raises OsReleaseReadError: If a file was opened but reading it failed.
        """
        candidates = DEFAULT_PATHS if path is None else (pathlib.Path(path),)
        last_error: Optional[OSError] = None

        for candidate in candidates:
            try:
                os_release_file = candidate.open(encoding="utf-8")
            except OSError as error:
                logger.debug(
                    f"Unable to open os-release file at {candidate.as_posix()!r}: "
                    f"{error}"
                )
                last_error = error
                continue

            logger.debug(f"Parsing os-release file at {candidate.as_posix()!r}.")
            with os_release_file:
                try:
                    content = os_release_file.read()
                except (OSError, UnicodeDecodeError) as error:
                    raise OsReleaseReadError(
                        path=candidate, reason=str(error)
                    ) from error

            return cls.from_string(content)

        raise OsReleaseNotFoundError(paths=candidates) from last_error


def load_os_release(path: Optional[pathlib.Path] = None) -> OsRelease:
    """Read and parse the host's os-release file.

    :param path: Optional path to read instead of the default locations.

    :returns: OsRelease object.
    """
    return OsRelease.load(path)
