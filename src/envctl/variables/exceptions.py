class UserDeclined(Exception):
    def __init__(self, message="Aborted", exit_if_declined=False):
        self.exit_if_declined = exit_if_declined

        super().__init__(message)


class DeletionFailure(Exception):
    def __init__(self, id, message):
        self.id = id
        self.message = message

        super().__init__(f"{message}, id: {id}")
