"""iCalendar property model - parsing and serialization, no I/O.

A property is one field of iCalendar data (ATTENDEE, DTSTART, SUMMARY, ...)
with optional parameters. See RFC 2445 section 4.1.1 and 4.2.
"""

from dataclasses import dataclass

from .errors import ParseError
from .folding import ParseMode, fold, unfold


@dataclass(frozen=True)
class Parameter:
    """A NAME=VALUE modifier attached to a property."""

    name: str
    value: str


def _check_name(name: str, text: str) -> str:
    if not name or ";" in name or ":" in name:
        raise ParseError(f"Invalid property name '{name}'", text)
    return name.upper()


class Property:
    """A named, parameter-decorated iCalendar field."""

    def __init__(self, name: str, value: str):
        self._name = _check_name(name, name)
        self._value = value
        self._parameters: list[Parameter] = []

    @classmethod
    def parse(cls, text: str, mode: ParseMode = ParseMode.LOOSE) -> "Property":
        """
        Parse one content line (possibly folded) into a property.

        The value is everything after the first ':', which is found without
        regard to quoting. A parameter value holding ':' must therefore come
        after the real separator to survive.

        Args:
            text: iCalendar content line, folded or not
            mode: STRICT rejects unquoted commas in parameter values and
                malformed folds; LOOSE keeps commas as literal content

        Raises:
            ParseError: If the line does not match the property grammar
        """
        line = unfold(text, mode)

        name_and_params, sep, value = line.partition(":")
        if not sep:
            raise ParseError("Could not find ':'", text)

        name, _, params = name_and_params.partition(";")
        prop = cls(_check_name(name, text), value)
        for param in _parse_parameters(params, mode, text):
            prop.add_parameter(param)
        return prop

    @property
    def name(self) -> str:
        """Property name, always uppercase."""
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self._name = _check_name(name, name)

    @property
    def value(self) -> str:
        """Raw value after the ':' separator, unfolded."""
        return self._value

    @value.setter
    def value(self, value: str) -> None:
        self._value = value

    @property
    def parameters(self) -> tuple[Parameter, ...]:
        return tuple(self._parameters)

    def add_parameter(self, param: Parameter | str, value: str | None = None) -> None:
        """Append a parameter, given either as a Parameter or a name and value."""
        if isinstance(param, Parameter):
            self._parameters.append(param)
        else:
            self._parameters.append(Parameter(param, value or ""))

    def parameter_at(self, index: int) -> Parameter:
        return self._parameters[index]

    def set_parameter(self, name: str, value: str) -> None:
        """
        Give every parameter with this name (case-insensitive) a new value.

        Each match is replaced in place, keeping its spelling of the name and
        its position. Appends the parameter if none matches.
        """
        wanted = name.upper()
        replaced = False
        for i, param in enumerate(self._parameters):
            if param.name.upper() == wanted:
                self._parameters[i] = Parameter(param.name, value)
                replaced = True
        if not replaced:
            self._parameters.append(Parameter(name, value))

    def get_parameter(self, name: str) -> Parameter | None:
        """First parameter with the given name, compared case-insensitively."""
        wanted = name.upper()
        for param in self._parameters:
            if param.name.upper() == wanted:
                return param
        return None

    def to_text(self) -> str:
        """Export to a folded iCalendar content line.

        Parameter values are always quoted, whatever their original form.
        """
        parts = [self._name]
        for param in self._parameters:
            parts.append(f';{param.name}="{param.value}"')
        parts.append(":")
        parts.append(self._value)
        return fold("".join(parts))

    def __repr__(self) -> str:
        return f"Property(name={self._name!r}, value={self._value!r}, parameters={self._parameters!r})"


def _parse_parameters(segment: str, mode: ParseMode, text: str) -> list[Parameter]:
    """
    Scan the ';'-separated parameter segment of a property line.

    Quotes toggle quoting and are dropped. Outside quotes ';' ends a
    parameter and '=' switches from the name to the value. Parameters
    with an empty name are discarded.
    """
    params: list[Parameter] = []
    pname: list[str] = []
    pvalue: list[str] = []
    in_quote = False
    in_param_name = True

    def finish() -> None:
        if pname:
            params.append(Parameter("".join(pname), "".join(pvalue)))
        pname.clear()
        pvalue.clear()

    for ch in segment:
        if ch == '"':
            in_quote = not in_quote
        elif ch == ";" and not in_quote:
            finish()
            in_param_name = True
        elif ch == "=" and not in_quote:
            in_param_name = False
        elif ch == "," and not in_quote and not in_param_name and mode is ParseMode.STRICT:
            raise ParseError("Found unquoted comma in parameter value", text)
        elif in_param_name:
            pname.append(ch)
        else:
            pvalue.append(ch)

    finish()
    return params
