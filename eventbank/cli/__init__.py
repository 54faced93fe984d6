"""
eventbank CLI

Commands:
- eventbank run OP... - Apply operations to a fresh account and audit the result
- eventbank version - Show version information
"""
