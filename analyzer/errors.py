class AnalyzerError(Exception):
    summary: str = "analysis failed"

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or self.summary)
        self.detail = detail or self.summary


class RetrievalError(AnalyzerError):
    summary = "URL connection error"


class TokenizerError(AnalyzerError):
    summary = "malformed HTML"


class ParserError(AnalyzerError):
    summary = "malformed HTML"


class UnexpectedTokenError(ParserError):
    pass


class UnmatchedTagError(ParserError):
    pass


class NestingTooDeepError(ParserError):
    pass
