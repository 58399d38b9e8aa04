from safeint.bigint.base import BaseBigIntAdapter
from safeint.bigint.factory import BigIntAdapterFactory
from safeint.bigint.native_adapter import NativeIntAdapter

__all__ = ["BaseBigIntAdapter", "BigIntAdapterFactory", "NativeIntAdapter"]
