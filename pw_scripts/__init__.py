"""
Phala World campaign tooling
Nonce-tracked extrinsic submission and phase scripts for the PW NFT sale
"""

__version__ = "0.1.0"
