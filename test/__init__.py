from .glob    import *
from .charset import *
from .mask    import *
from .params  import *
