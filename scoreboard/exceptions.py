class ScoreboardError(Exception):
    pass


class InvalidConfigurationError(ScoreboardError, ValueError):
    pass


class InvalidSideError(ScoreboardError, ValueError):
    pass


class EmptyHistoryError(ScoreboardError):
    pass


class MatchAlreadyDecidedError(ScoreboardError):
    pass


class SessionExistsError(ScoreboardError):
    pass


class SessionNotFoundError(ScoreboardError, KeyError):
    pass
