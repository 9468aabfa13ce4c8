class HorizonLoggerError(Exception):
    pass


class HistoryUnavailableError(HorizonLoggerError):
    def __init__(self, reason, details=None):
        self.reason = reason
        self.details = details
        super().__init__(reason)
