"""
Chain-of-responsibility engine.

- `protocols.py`: Processor protocol
- `chain.py`: Chain, ChainBuilder, BaseProcessor, build_chain
- `debug/`: Debug-message pipeline
- `quests/`: Quest-state pipeline
"""

from chainkit.engine.chain import BaseProcessor, Chain, ChainBuilder, build_chain

__all__ = [
    "BaseProcessor",
    "Chain",
    "ChainBuilder",
    "build_chain",
]
