"""
Demonstration script with the hard-coded calls of the printf demo program.

The first two entries format the same sentence with the typed and the
untyped emitter. The untyped template keeps the "%s" of the typed one, so
its "s" is literal text after the substituted value.
"""
from vprintf.model import Script, Variant
from vprintf.values import FloatValue, IntegerValue, TextValue


LANGUAGE_TEMPLATE = (
    "The %s programming language is from year %d. \n"
    "Current version C++%d. GCC support since version %f.\n"
)

PACK_LANGUAGE_TEMPLATE = (
    "The %s programming language is from year %. \n"
    "Current version C++%. GCC support since version %.\n"
)


def build_demo_script() -> Script:
    script = Script(name="printf demo", metadata={"source": "main"})

    language_args = (TextValue("C++"), IntegerValue(1985), IntegerValue(20), FloatValue(10.1))
    script.add(Variant.CSTYLE, LANGUAGE_TEMPLATE, *language_args)
    script.add(Variant.PACK, PACK_LANGUAGE_TEMPLATE, *language_args)

    script.add(Variant.PACK, "The % language is from %.\n", TextValue("C++"), IntegerValue(1985))
    script.add(Variant.SEQUENCE, "% mice, % cat\n", IntegerValue(3), IntegerValue(1))

    return script
