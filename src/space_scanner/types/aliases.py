"""Type aliases using modern PEP 695 syntax.

These describe the plain-data shapes handed to a host application when
results cross a process or UI boundary.
"""

# Serialized Volume: name, mount_path, total_bytes, available_bytes
type VolumePayload = dict[str, str | int]

# Serialized DirectoryEntry: name, path, is_directory, size_bytes
type EntryPayload = dict[str, str | int | bool]

# Serialized ScanError: kind, message, path
type ErrorPayload = dict[str, str]
