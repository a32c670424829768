"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases

    The ``message`` of each diagnostic is the ``reason`` half of the
    ``(line, reason)`` pair returned by the tokenizer and parser.
    """

    _KEYWORDS_HINT = "Statements start with msgid, msgid_plural, msgstr, msgctxt or '#'"

    # ------------------------------------------------------------------
    # Lexical errors
    # ------------------------------------------------------------------

    @staticmethod
    def unknown_keyword(word: str, line: int) -> Diagnostic:
        """Line starts with something that is not a keyword, string or comment.

        Args:
            word: The offending whitespace-delimited word
            line: Source line

        Returns:
            Diagnostic for UNKNOWN_KEYWORD
        """
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_KEYWORD,
            message=f"unknown keyword '{word}'",
            line=line,
            hint=ErrorTemplate._KEYWORDS_HINT,
        )

    @staticmethod
    def missing_space(keyword: str, line: int) -> Diagnostic:
        """Keyword glued to its argument (or to the end of the line).

        Args:
            keyword: Keyword as written, e.g. "msgid" or "msgstr[1]"
            line: Source line

        Returns:
            Diagnostic for MISSING_SPACE_AFTER_KEYWORD
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_SPACE_AFTER_KEYWORD,
            message=f"no space after '{keyword}'",
            line=line,
            hint=f'Write {keyword} "..." with a space before the string',
        )

    @staticmethod
    def unterminated_string(line: int) -> Diagnostic:
        """String literal without a closing quote on its own line."""
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_STRING,
            message="unterminated string",
            line=line,
            hint='Close the string with " before the end of the line; '
            "continue long strings on the next line with a new literal",
        )

    @staticmethod
    def unsupported_escape(char: str, line: int) -> Diagnostic:
        """Backslash followed by a character with no defined escape.

        Args:
            char: Character following the backslash ("" at end of line)
            line: Source line

        Returns:
            Diagnostic for UNSUPPORTED_ESCAPE
        """
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_ESCAPE,
            message=f"unsupported escape sequence '\\{char}'",
            line=line,
            hint='Supported escapes are \\", \\\\, \\n, \\t and \\r',
        )

    @staticmethod
    def invalid_plural_index(line: int) -> Diagnostic:
        """Malformed msgstr[N] bracket."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_PLURAL_INDEX,
            message="invalid plural form index",
            line=line,
            hint="Plural forms are written msgstr[0], msgstr[1], ...",
        )

    # ------------------------------------------------------------------
    # Structural errors
    # ------------------------------------------------------------------

    @staticmethod
    def expected_string(keyword: str, line: int) -> Diagnostic:
        """Keyword not followed by at least one string literal."""
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_STRING,
            message=f"expected string after {keyword}",
            line=line,
        )

    @staticmethod
    def expected_msgid(line: int, found: str | None = None) -> Diagnostic:
        """Translation does not start with msgctxt or msgid.

        Args:
            line: Line of the offending token
            found: Description of what was found instead

        Returns:
            Diagnostic for EXPECTED_MSGID
        """
        hint = f"found {found}" if found else None
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_MSGID,
            message="expected msgid",
            line=line,
            hint=hint,
        )

    @staticmethod
    def expected_msgstr(line: int) -> Diagnostic:
        """msgid not followed by msgstr or msgid_plural."""
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_MSGSTR,
            message="expected msgstr",
            line=line,
            hint="Every msgid needs a msgstr (or msgid_plural and msgstr[N])",
        )

    @staticmethod
    def expected_plural_msgstr(line: int) -> Diagnostic:
        """msgid_plural not followed by msgstr[N]."""
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_PLURAL_MSGSTR,
            message="expected msgstr[N] after msgid_plural",
            line=line,
        )

    @staticmethod
    def plural_index_without_plural(index: int, line: int) -> Diagnostic:
        """msgstr[N] used in a translation without msgid_plural."""
        return Diagnostic(
            code=DiagnosticCode.PLURAL_INDEX_WITHOUT_PLURAL,
            message=f"msgstr[{index}] requires msgid_plural",
            line=line,
        )

    @staticmethod
    def plural_index_order(line: int) -> Diagnostic:
        """Plural indices with a gap, repeat, or out of order."""
        return Diagnostic(
            code=DiagnosticCode.PLURAL_INDEX_ORDER,
            message="plural form indices must be in order starting at 0",
            line=line,
        )

    @staticmethod
    def mixed_obsolete(line: int) -> Diagnostic:
        """One translation mixes #~ statements with active ones."""
        return Diagnostic(
            code=DiagnosticCode.MIXED_OBSOLETE,
            message="obsolete and active statements mixed in one translation",
            line=line,
            hint="Prefix every statement of an obsolete translation with #~",
        )

    @staticmethod
    def dangling_comment(line: int) -> Diagnostic:
        """Comments at the end of input with no translation to attach to."""
        return Diagnostic(
            code=DiagnosticCode.DANGLING_COMMENT,
            message="comment is not followed by a translation",
            line=line,
        )

    # ------------------------------------------------------------------
    # I/O errors
    # ------------------------------------------------------------------

    @staticmethod
    def file_read_failed(path: str, reason: str) -> Diagnostic:
        """Catalog file could not be read.

        Args:
            path: Human-readable path of the catalog
            reason: Operating system error description

        Returns:
            Diagnostic for FILE_READ_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.FILE_READ_FAILED,
            message=f"could not parse file {path}: {reason}",
            file=path,
        )
