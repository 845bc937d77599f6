"""Errors raised while parsing rules text."""


class ParseError(Exception):
    """Rules text could not be parsed.

    ``culprit`` names the text that failed, with the path of enclosing
    sections and subsections prefixed. ``message`` explains what was expected.
    """

    def __init__(self, culprit: str, message: str) -> None:
        super().__init__(culprit, message)
        self.culprit = culprit
        self.message = message

    def __str__(self) -> str:
        return (
            "There was an error parsing the following:\n"
            f"{self.culprit}\n\nError: {self.message}"
        )