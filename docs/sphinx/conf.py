# Copyright 2026 ScalarEnum Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for ScalarEnum documentation."""

project = "ScalarEnum"
author = "ScalarEnum Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]
autodoc_member_order = "bysource"

html_theme = "alabaster"
