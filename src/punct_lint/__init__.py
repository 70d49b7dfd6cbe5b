# SPDX-License-Identifier: Apache-2.0
"""
punct-lint: full-width punctuation linter for documentation trees.

Scans text files for CJK full-width punctuation and either reports each
occurrence as path:line:col or rewrites it to the half-width ASCII form.
1. punctuation_table holds the fixed substitution rules
2. scanner detects, locates and fixes matches in a block of text
3. linter, cli and adapter are the file, console and HTTP surfaces
"""

__version__ = "0.1.0"
