#!/usr/bin/env python3
"""
Basic error tree example.

This example builds a small tree of errors, raises a derived error, and
checks its ancestry the way a request handler would.

Usage:
    python examples/basic_usage.py
"""

from errcode_python import GeneralError, is_error, new_general_error

# Error definitions, usually kept in one module of the application
ErrStorage = new_general_error("storage").make()
ErrNotFound = ErrStorage.produce().sub_type("not found").make()
ErrConflict = ErrStorage.produce().sub_type("conflict").make()


def load_user(user_id: int) -> dict:
    """Pretend to load a user and fail."""
    try:
        raise KeyError(user_id)
    except KeyError as exc:
        raise (
            ErrNotFound.produce()
            .message_f("user {} does not exist", user_id)
            .external_err_mess(exc)
            .make()
        )


def main() -> None:
    """Run the example."""
    print(f"storage:   {ErrStorage.error_code}  {ErrStorage.code_note}")
    print(f"not found: {ErrNotFound.error_code}  {ErrNotFound.code_note}")
    print(f"conflict:  {ErrConflict.error_code}  {ErrConflict.code_note}")
    print()

    try:
        load_user(42)
    except GeneralError as err:
        print(f"Caught: {err}")
        print(f"  is storage error:  {err.is_(ErrStorage)}")
        print(f"  is not-found:      {err.is_(ErrNotFound)}")
        print(f"  is conflict:       {err.is_(ErrConflict)}")
        print(f"  caused by KeyError: {isinstance(err.cause, KeyError)}")
        print(f"  generic query:     {is_error(err, ErrStorage)}")
        print()
        print(err.fmt_response("Could not load the user."))
        print(err.to_report().to_response())


if __name__ == "__main__":
    main()
