class SprigError(Exception):
    """ Base class for all Sprig errors"""
    pass

class SprigSyntaxError(SprigError):
    """ Raised when the reader meets a malformed token, an unmatched paren or premature end of input"""

class SprigUnboundSymbol(SprigError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""

class SprigTypeError(SprigError):
    """ Raised when an operand is the wrong kind of expression"""

class SprigArityError(SprigError):
    """ Raised when a special form or procedure gets the wrong number of arguments"""

class SprigDivisionByZero(SprigError, ZeroDivisionError):
    """ Raised when an exact fraction would get a zero denominator"""

class SprigRedefinitionError(SprigError):
    """ Raised when define targets a symbol already bound in the same scope"""

class SprigNotAFunction(SprigError):
    """ Raised when the head of an application is not a procedure"""

class SprigInvalidUnquote(SprigError):
    """ Raised when unquote or unquote-splice appears where it cannot be expanded"""
