class NotLoggedIn(Exception):
    def __init__(self):
        super().__init__(
            "Login required: set api.token in the config file or "
            "ENVCTL_API_TOKEN"
        )


class VariableNotFound(Exception):
    def __init__(self, resource, id):
        self.resource = resource
        self.id = id

        super().__init__(f"{resource} not found")


class PermissionDenied(Exception):
    def __init__(self, resource, id, reason):
        self.resource = resource
        self.id = id

        super().__init__(f"permission denied on {resource}: {reason}")
