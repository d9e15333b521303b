from .core import CompositeTransducer
from .core import FilterTransducer
from .core import FirstTransducer
from .core import IdentityTransducer
from .core import LastTransducer
from .core import MapTransducer
from .core import ScanTransducer
from .core import TakeTransducer
from .core import TakeWhileTransducer
from .core import Transducer
from .core import compose
from .core import decompose
from .core import identity
from .core import transducer
from .types import BaseTransducer

__all__ = [
  "BaseTransducer",
  "Transducer",
  "IdentityTransducer",
  "MapTransducer",
  "FilterTransducer",
  "FirstTransducer",
  "LastTransducer",
  "TakeTransducer",
  "TakeWhileTransducer",
  "ScanTransducer",
  "CompositeTransducer",
  "compose",
  "decompose",
  "identity",
  "transducer",
]
