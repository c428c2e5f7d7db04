# File: app/core/exceptions.py

"""
Domain exceptions raised by the service layer.

They carry enough context (entity kind, key) for the exception handlers in
app/main.py to render a Result envelope.
"""


class ObjectNotFoundError(Exception):
    def __init__(self, object_name: str, object_id: str):
        self.object_name = object_name
        self.object_id = object_id
        super().__init__(f"Could not find {object_name} with Id {object_id}")


class EmailAlreadyExistsError(Exception):
    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email '{email}' already exists.")


class UnknownPrincipalError(Exception):
    """Authentication lookup could not resolve the given email."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"email {email} is not found")
