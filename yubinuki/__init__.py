# =======================================================================================
# yubinuki/__init__.py - Package Initialization
# =======================================================================================
"""
YubiNuki - Yubikey NFC Door Gatekeeper

Reads a Yubikey OTP over NFC, checks its identity against a local allow-list,
verifies the OTP with Yubicloud and unlatches a Nuki smart lock through the
Nuki bridge HTTP API.
"""

__version__ = "1.0.0"
__author__ = "YubiNuki Team"
