# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Custom errors for the password shell."""


class ShellConfigInvalidError(Exception):
    """Exception raised when the shell configuration is found to be invalid.

    Attrs:
        msg (str): Explanation of the error.
    """

    def __init__(self, msg: str):
        """Initialize a new instance of the ShellConfigInvalidError exception.

        Args:
            msg (str): Explanation of the error.
        """
        super().__init__(msg)
        self.msg = msg


class InputTooLongError(Exception):
    """Exception raised when a token read from the input exceeds the accepted length.

    Attrs:
        msg (str): Explanation of the error.
        max_length (int): The longest accepted token.
    """

    def __init__(self, msg: str, max_length: int):
        """Initialize a new instance of the InputTooLongError exception.

        Args:
            msg (str): Explanation of the error.
            max_length (int): The longest accepted token.
        """
        super().__init__(msg)
        self.msg = msg
        self.max_length = max_length


class InputExhaustedError(Exception):
    """Exception raised when the input ends while a token is still expected.

    Attrs:
        msg (str): Explanation of the error.
    """

    def __init__(self, msg: str):
        """Initialize a new instance of the InputExhaustedError exception.

        Args:
            msg (str): Explanation of the error.
        """
        super().__init__(msg)
        self.msg = msg


class AttemptsExhaustedError(Exception):
    """Exception raised when too many weak passwords were entered.

    Attrs:
        msg (str): Explanation of the error.
    """

    def __init__(self, msg: str):
        """Initialize a new instance of the AttemptsExhaustedError exception.

        Args:
            msg (str): Explanation of the error.
        """
        super().__init__(msg)
        self.msg = msg
