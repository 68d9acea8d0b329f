# Copyright 2026 SJavac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Allow ``python -m sjavac``."""

from sjavac.cli.main import main

main()
