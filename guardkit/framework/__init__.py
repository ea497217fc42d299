"""``guardkit.framework`` provides the settings, logging, hooks and command line
interface that surround the error construction engine.
"""
