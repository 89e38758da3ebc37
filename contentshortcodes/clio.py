"""
Expand content shortcodes into HTML markup.

Copyright 2026, Content Shortcodes contributors
"""

from argparse import ArgumentParser, Namespace
from dataclasses import MISSING, Field, dataclass, fields, is_dataclass
from typing import Any, TypeVar, cast


class BaseOption:
    @staticmethod
    def field_name() -> str:
        return "argument"


@dataclass
class BooleanOption(BaseOption):
    true_text: str
    false_text: str


def boolean_option(true_text: str, false_text: str) -> dict[str, Any]:
    "Identifies a command-line argument as a boolean (on/off) flag."

    return {BaseOption.field_name(): BooleanOption(true_text, false_text)}


T = TypeVar("T")


def _get_boolean_option(field: Field[Any]) -> BooleanOption | None:
    attrs = field.metadata.get(BaseOption.field_name())
    if attrs is None:
        return None
    elif isinstance(attrs, BooleanOption):
        return attrs
    else:
        raise TypeError(f"expected: {BooleanOption.__name__}; got: {type(attrs).__name__}")


def _inverse_name(arg_name: str) -> str:
    if arg_name.startswith("enable-"):
        return "disable-" + arg_name.removeprefix("enable-")
    elif arg_name.startswith("skip-"):
        return "keep-" + arg_name.removeprefix("skip-")
    else:
        return f"no-{arg_name}"


def add_arguments(parser: ArgumentParser, options_type: type[Any]) -> None:
    """
    Adds a pair of on/off flags to a command-line argument parser for each annotated boolean field of a data-class.

    :param parser: A command-line argument parser.
    :param options_type: A data-class type that encapsulates configuration options.
    """

    if not is_dataclass(options_type):
        raise TypeError(f"expected: data-class as argument source; got: {options_type.__name__}")

    for field in fields(options_type):
        if field.type is not bool and field.type != "bool":
            continue
        bool_opt = _get_boolean_option(field)
        if bool_opt is None:
            continue

        arg_name = field.name.replace("_", "-")
        true_text = bool_opt.true_text
        if field.default is True:
            true_text += " (default)"
        parser.add_argument(
            f"--{arg_name}",
            dest=field.name,
            action="store_true",
            default=field.default,
            help=true_text,
        )
        false_text = bool_opt.false_text
        if field.default is False:
            false_text += " (default)"
        parser.add_argument(
            f"--{_inverse_name(arg_name)}",
            dest=field.name,
            action="store_false",
            help=false_text,
        )


def get_options(args: Namespace, options_type: type[T]) -> T:
    """
    Extracts configuration options from command-line arguments acquired by an argument parser.

    :param args: Arguments acquired by a command-line argument parser.
    :param options_type: A data-class type that encapsulates configuration options.
    :returns: Configuration options as a data-class instance.
    """

    if not is_dataclass(options_type):
        raise TypeError(f"expected: data-class as argument target; got: {type(options_type).__name__}")

    params: dict[str, Any] = {}
    for field in fields(options_type):
        value = getattr(args, field.name, MISSING)
        if value is not MISSING:
            params[field.name] = value
    return cast(type[T], options_type)(**params)
