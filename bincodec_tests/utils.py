import struct
from random import Random
from typing import Any

from bincodec.shapes import (
    BOOL,
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    I128,
    TEXT,
    U8,
    U16,
    U32,
    U64,
    U128,
    UNIT,
    ArrayShape,
    BoolShape,
    EnumShape,
    Field,
    FloatShape,
    IntShape,
    OptionalShape,
    SequenceShape,
    Shape,
    StructShape,
    TextShape,
    TupleShape,
    UnionShape,
    UnitShape,
    Variant,
    VariantShape,
    min_encoded_size,
)

PRIMITIVES: list[Shape] = [U8, U16, U32, U64, U128, I8, I16, I32, I64, I128, F32, F64, BOOL, UNIT, TEXT]

_TEXT_ALPHABET = 'abcXYZ019 _-éß中文\U0001f600'


def random_shape(rng: Random, *, depth: int = 3) -> Shape:
    """Random shape, compound shapes are only generated while `depth` is positive."""
    if depth <= 0 or rng.random() < 0.3:
        return rng.choice(PRIMITIVES)
    kind = rng.choice(['array', 'tuple', 'struct', 'optional', 'enum', 'union', 'sequence'])
    match kind:
        case 'array':
            return ArrayShape(random_shape(rng, depth=depth - 1), rng.randint(0, 3))
        case 'tuple':
            return TupleShape(tuple(random_shape(rng, depth=depth - 1) for _ in range(rng.randint(0, 3))))
        case 'struct':
            count = rng.randint(1, 3)
            return StructShape('S', tuple(Field(f'f{i}', random_shape(rng, depth=depth - 1)) for i in range(count)))
        case 'optional':
            inner = random_shape(rng, depth=depth - 1)
            if isinstance(inner, OptionalShape):
                inner = inner.inner
            if isinstance(inner, UnitShape):
                # Some(()) and None are both null in json
                inner = BOOL
            return OptionalShape(inner)
        case 'enum':
            return EnumShape('E', tuple(f'V{i}' for i in range(rng.randint(1, 4))))
        case 'union':
            count = rng.randint(1, 4)
            variants = tuple(VariantShape(f'V{i}', random_shape(rng, depth=depth - 1)) for i in range(count))
            return UnionShape('U', variants)
        case 'sequence':
            element = random_shape(rng, depth=depth - 1)
            if min_encoded_size(element) == 0:
                element = U8
            return SequenceShape(element)
    raise AssertionError(kind)


def random_value(rng: Random, shape: Shape) -> Any:
    """Random value that matches the given shape, in the canonical form produced by decoding."""
    match shape:
        case IntShape():
            return rng.randint(shape.lower_bound, shape.upper_bound)
        case FloatShape(bits=32):
            return struct.unpack('<f', struct.pack('<f', rng.uniform(-1e6, 1e6)))[0]
        case FloatShape():
            return rng.uniform(-1e300, 1e300)
        case BoolShape():
            return rng.random() < 0.5
        case UnitShape():
            return ()
        case TextShape():
            return ''.join(rng.choice(_TEXT_ALPHABET) for _ in range(rng.randint(0, 10)))
        case ArrayShape(element=element, length=length):
            return tuple(random_value(rng, element) for _ in range(length))
        case TupleShape(fields=fields):
            return tuple(random_value(rng, i) for i in fields)
        case StructShape(fields=fields):
            return {i.name: random_value(rng, i.shape) for i in fields}
        case OptionalShape(inner=inner):
            return None if rng.random() < 0.3 else random_value(rng, inner)
        case EnumShape(variants=variants):
            return rng.choice(variants)
        case UnionShape(variants=variants):
            variant = rng.choice(variants)
            return Variant(variant.name, random_value(rng, variant.payload))
        case SequenceShape(element=element):
            return [random_value(rng, element) for _ in range(rng.randint(0, 4))]
    raise TypeError(shape)
