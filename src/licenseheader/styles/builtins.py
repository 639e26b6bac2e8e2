# topmark:header:start
#
#   project      : LicenseHeader
#   file         : builtins.py
#   file_relpath : src/licenseheader/styles/builtins.py
#   license      : MIT
#   copyright    : (c) 2025 The LicenseHeader Authors
#
# topmark:header:end

"""Built-in comment style bindings.

Exports:
    DEFAULT_STYLES: Ordered table of default bindings. Lookup walks it front to back
        and the first binding that covers an extension wins.
    FALLBACK_STYLE: C-style block used for extensions that no binding covers.

Notes:
    - ``php`` appears in both the C-style family and the PHP block variant. Because the
      first match wins, plain ``php`` files resolve to the C-style block; register a
      custom binding to opt into ``<?php /* ... */ ?>``.
"""

from __future__ import annotations

from typing import Final

from licenseheader.styles.base import CommentStyle, StyleBinding

C_STYLE: Final = CommentStyle("/*", " * ", " */")
HTML_STYLE: Final = CommentStyle("<!--", "    ", "-->")
HASH_STYLE: Final = CommentStyle("#", "# ", "")
SQL_STYLE: Final = CommentStyle("--", "-- ", "")
PHP_STYLE: Final = CommentStyle("<?php /*", " * ", " */ ?>")
RUST_DOC_STYLE: Final = CommentStyle("//!", "//! ", "")
LISP_STYLE: Final = CommentStyle(";;", ";; ", "")
BATCH_STYLE: Final = CommentStyle("@REM", "@REM ", "")
VB_STYLE: Final = CommentStyle("'", "' ", "")
ASM_STYLE: Final = CommentStyle(";", "; ", "")
FSHARP_STYLE: Final = CommentStyle("(*", " * ", "*)")

FALLBACK_STYLE: Final = CommentStyle("/*", " * ", " */")

DEFAULT_STYLES: Final[tuple[StyleBinding, ...]] = (
    StyleBinding.of(
        [
            "kt",
            "kts",
            "gradle",
            "java",
            "groovy",
            "js",
            "jsx",
            "ts",
            "tsx",
            "css",
            "scss",
            "less",
            "c",
            "cpp",
            "h",
            "hpp",
            "cc",
            "cxx",
            "m",
            "mm",
            "swift",
            "go",
            "scala",
            "php",
            "dart",
        ],
        C_STYLE,
    ),
    StyleBinding.of(
        [
            "html",
            "xml",
            "xhtml",
            "jsp",
            "jspx",
            "vue",
            "svelte",
            "md",
            "markdown",
            "rdoc",
            "xaml",
            "aspx",
            "cshtml",
            "htm",
            "xsl",
            "xslt",
            "svg",
            "hbs",
            "handlebars",
        ],
        HTML_STYLE,
    ),
    StyleBinding.of(
        [
            "py",
            "rb",
            "pl",
            "sh",
            "bash",
            "zsh",
            "fish",
            "yml",
            "yaml",
            "properties",
            "conf",
            "toml",
            "ini",
            "cfg",
            "env",
            "r",
            "rake",
            "ruby",
            "python",
            "perl",
            "tcl",
            "make",
            "makefile",
            "cmake",
        ],
        HASH_STYLE,
    ),
    StyleBinding.of(["sql", "pgsql", "psql", "plsql", "mysql", "hql"], SQL_STYLE),
    StyleBinding.of(["php"], PHP_STYLE),
    StyleBinding.of(["rs"], RUST_DOC_STYLE),
    StyleBinding.of(["lisp", "cl", "el", "clj", "cljs", "cljc", "edn"], LISP_STYLE),
    StyleBinding.of(["bat", "cmd"], BATCH_STYLE),
    StyleBinding.of(["vb", "bas", "vbs", "vba"], VB_STYLE),
    StyleBinding.of(["asm", "s", "nasm"], ASM_STYLE),
    StyleBinding.of(["fs", "fsi", "fsx", "fsscript"], FSHARP_STYLE),
)
