class SlimBaseError(Exception):
    pass


class PropertyError(SlimBaseError, AttributeError):
    action = "Accessing"
    kind = "property"

    def __init__(self, type_name: str, name: str):
        super().__init__(f"{self.action} {self.kind}: {type_name}::{name}")
        # AttributeError.__init__ resets `name`, so assign afterwards.
        self.type_name = type_name
        self.name = name


class UnknownPropertyError(PropertyError):
    kind = "unknown property"

    def __init__(self, type_name: str, name: str, action: str = "Getting"):
        self.action = action
        super().__init__(type_name, name)


class ReadOnlyPropertyError(PropertyError):
    kind = "read-only property"

    def __init__(self, type_name: str, name: str, action: str = "Setting"):
        self.action = action
        super().__init__(type_name, name)


class WriteOnlyPropertyError(PropertyError):
    action = "Getting"
    kind = "write-only property"


class UnknownMethodError(SlimBaseError, AttributeError):
    def __init__(self, type_name: str, name: str):
        super().__init__(f"Calling unknown method: {type_name}::{name}()")
        self.type_name = type_name
        self.name = name


class IllegalOperationError(SlimBaseError):
    def __init__(self, type_name: str, operation: str):
        super().__init__(f"Singleton class {type_name} can't be {operation}.")
        self.type_name = type_name
        self.operation = operation
