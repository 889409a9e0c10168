"""
Monadic combinators over Buckets.

A Bucket with a cause in its error slot short-circuits every combinator.
Logs accumulate in order; the outer bucket keeps its id, name and meta.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Iterable

from .bucket import Bucket, grab

BucketFunction = Callable[[Any], Bucket]


def bind(bucket: Bucket, f: BucketFunction) -> Bucket:
    """Feed the bucket's value to `f` and prepend the bucket's logs to the result."""
    if bucket.failed:
        return bucket
    new_bucket = f(bucket.value)
    return replace(
        new_bucket,
        logs=bucket.logs + new_bucket.logs,
        id=bucket.id,
        name=bucket.name,
        meta=dict(bucket.meta),
    )


def fmap(f: Callable[[Any], Any], bucket: Bucket) -> Bucket:
    """Apply a plain function to the value; logs are untouched."""
    if bucket.failed:
        return bucket
    return replace(bucket, value=f(bucket.value))


def join(bucket: Bucket) -> Bucket:
    """Flatten a Bucket whose value is itself a Bucket."""
    if bucket.failed:
        return bucket
    inner = bucket.value
    if not isinstance(inner, Bucket):
        raise TypeError(f"Cannot join - inner value is not a Bucket: {type(inner).__name__}")
    return replace(inner, logs=bucket.logs + inner.logs, id=bucket.id, name=bucket.name, meta=dict(bucket.meta))


def lift(f: Callable[[Any], Any]) -> Callable[[Bucket], Bucket]:
    """Turn ``a -> b`` into ``Bucket a -> Bucket b``."""

    def lifted(bucket: Bucket) -> Bucket:
        return fmap(f, bucket)

    lifted.__name__ = getattr(f, "__name__", "lifted")
    return lifted


def compose(f: BucketFunction, g: BucketFunction) -> BucketFunction:
    """Left-to-right composition: ``compose(f, g)(x) == bind(f(x), g)``."""

    def composed(x: Any) -> Bucket:
        return bind(f(x), g)

    return composed


def sequence(buckets: Iterable[Bucket]) -> Bucket:
    """Collect buckets into one Bucket of a list of values; stops at the first error."""
    acc = grab([])
    for bucket in buckets:
        acc = bind(acc, lambda values, b=bucket: fmap(lambda v: values + [v], b))
        if acc.failed:
            return acc
    return acc


def map_m(f: BucketFunction, xs: Iterable[Any]) -> Bucket:
    """``sequence(map(f, xs))``."""
    return sequence(f(x) for x in xs)
