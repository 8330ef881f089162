class UnhashableKeyException(TypeError):
    def __init__(self, key=None, message=None):
        self.key = key
        if message is None:
            message = "Key of type %s is not hashable." % type(key).__name__
        self.message = message
        super().__init__(self.message)


class BadValueException(Exception):
    def __init__(self, name, value, reason, cause=None):
        self.name = name
        self.value = value
        self.reason = reason
        self.cause = cause
        self.message = "Bad value for field of type %s.  Reason: %s" % (name, reason)
        if cause is not None:
            self.message = "%s (caused by: %s)" % (self.message, cause)
        super().__init__(self.message)


class BadFieldSpecification(Exception):
    def __init__(self, message="Invalid field specification"):
        self.message = message
        super().__init__(self.message)


class InvalidConfigException(Exception):
    def __init__(self, message="Invalid configuration"):
        self.message = message
        super().__init__(self.message)


class EncodeException(Exception):
    def __init__(self, message="Dictionary could not be encoded"):
        self.message = message
        super().__init__(self.message)


class DecodeException(Exception):
    def __init__(self, message="Dictionary could not be decoded"):
        self.message = message
        super().__init__(self.message)
