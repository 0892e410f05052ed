# Copyright 2026 exspork Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the exspork documentation."""

project = "exspork"
author = "exspork Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
