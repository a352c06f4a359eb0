"""Application errors raised by services and handled by the views."""


class CredentialMismatch(Exception):
    """The current password entered by the user does not match the stored hash."""

    def __init__(self, message="Le mot de passe renseigné est incorrect"):
        super().__init__(message)
        self.message = message
