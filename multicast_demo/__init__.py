"""
Multicast Demo - Composed Callback Invocation

A small demonstration of composing several formatting callbacks into one
ordered unit and then invoking each constituent callback on its own, with an
argument chosen at the call site instead of one shared argument.
"""

__version__ = "0.1.0"
__author__ = "Multicast Demo Team"
