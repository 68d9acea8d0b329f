# Copyright 2026 SJavac Contributors
# SPDX-License-Identifier: Apache-2.0

"""sjavac: static validation of sJava programs."""
