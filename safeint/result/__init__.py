from safeint.result.combinators import Stage, bind, fmap
from safeint.result.extractors import extract, loudly_extract
from safeint.result.models import Err, Ok, Result

__all__ = ["Err", "Ok", "Result", "Stage", "bind", "extract", "fmap", "loudly_extract"]
