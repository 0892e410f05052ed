# Copyright 2026 exspork Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for exspork."""
