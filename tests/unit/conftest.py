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
import pathlib

import pytest
from os_release import models

UBUNTU_OS_RELEASE = """\
PRETTY_NAME="Ubuntu 22.04.3 LTS"
NAME="Ubuntu"
VERSION_ID="22.04"
VERSION="22.04.3 LTS (Jammy Jellyfish)"
VERSION_CODENAME=jammy
ID=ubuntu
ID_LIKE=debian
HOME_URL="https://www.ubuntu.com/"
SUPPORT_URL="https://help.ubuntu.com/"
BUG_REPORT_URL="https://bugs.launchpad.net/ubuntu/"
PRIVACY_POLICY_URL="https://www.ubuntu.com/legal/terms-and-policies/privacy-policy"
UBUNTU_CODENAME=jammy
"""


@pytest.fixture()
def default_paths(tmp_path, monkeypatch):
    """Point the default os-release locations into a temporary directory.

    Neither file exists until a test writes it.
    """
    primary = tmp_path / "etc" / "os-release"
    fallback = tmp_path / "usr" / "lib" / "os-release"
    primary.parent.mkdir(parents=True)
    fallback.parent.mkdir(parents=True)

    monkeypatch.setattr(models, "DEFAULT_PATHS", (primary, fallback))

    return primary, fallback


@pytest.fixture()
def ubuntu_os_release(tmp_path) -> pathlib.Path:
    path = tmp_path / "ubuntu-os-release"
    path.write_text(UBUNTU_OS_RELEASE, encoding="utf-8")
    return path
