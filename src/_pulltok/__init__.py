"""
Implementation of pulltok, see pulltok for the public interface.
"""
