import logging


log = logging.getLogger('ksruntime')
log.addHandler(logging.NullHandler())
