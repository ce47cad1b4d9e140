class McLispError(Exception):
    """ Base class for all mclisp errors"""
    pass

class McLispInvalidAtom(McLispError):
    """ Raised when an atom name is empty or contains delimiter characters"""
    pass

class McLispUnboundSymbol(McLispError):
    """ Raised by strict lookups when a name has no binding"""
    pass

class McLispSyntaxError(McLispError):
    """ Raised when the input is malformed"""

class McLispArityError(McLispError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class McLispTypeError(McLispError):
    """ Raised when the types of arguments passed to a function are incorrect"""
