"""
System Inspector Module

Wraps the external tools diskmoose reads its ground truth from.

Components:
- BaseSystemInspector: Abstract capability interface
- CommandSystemInspector: Runs mount, who and df as subprocesses
- ScriptedSystemInspector: Fixture-backed double returning canned tool output
"""

from .base_inspector import BaseSystemInspector
from .command_inspector import CommandSystemInspector
from .scripted_inspector import ScriptedSystemInspector

__all__ = [
    "BaseSystemInspector",
    "CommandSystemInspector",
    "ScriptedSystemInspector",
]
