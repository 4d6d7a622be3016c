# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation

"""
Pytest configuration and shared fixtures for netrc-parse tests.

This module provides sample .netrc content used across the test suite.
"""

import pytest


@pytest.fixture
def macdef_content():
    """
    Two machines separated by an indented macro definition.

    Returns:
        str: .netrc content with one macdef
    """
    return (
        "machine host0.com login login0\n"
        "                     macdef uploadtest\n"
        "                            cd /pub/tests\n"
        "                            bin\n"
        "                            put filename.tar.gz\n"
        "                            echo 中文测试\n"
        "                            quit\n"
        "\n"
        "                     machine host1.com login login1"
    )


@pytest.fixture
def multi_machine_content():
    """
    Full machine entries spread over several lines.

    Returns:
        str: .netrc content with three complete machines
    """
    return """
    machine gerrit.onap.org login user1 password pass1 account acct1
    machine gerrit.opendaylight.org
        login user2
        password pass2
        account acct2
    machine gerrit.linuxfoundation.org login user3 password pass3 account acct3
    """
