"""
Exceptions for asset rename operations.
File: asset_renamer/core/exceptions.py
"""


class FileConflictError(FileExistsError):
    """
    Raised when a file conflict cannot be resolved.
    
    This exception is raised when:
    - The 'fail' conflict strategy meets an existing destination
    - Auto-rename cannot find a free name within the attempt limit
    
    When raised from a batch, ``completed`` holds the results of the
    renames performed before the conflict.
    
    Inherits from FileExistsError as it represents a more specific
    type of "file already exists" condition with resolution context.
    """
    
    def __init__(self, filepath, strategy=None, message=None):
        """
        Initialize file conflict error.
        
        Args:
            filepath: Path or str of the conflicting file
            strategy: The conflict resolution strategy that failed
            message: Custom error message
        """
        self.filepath = filepath
        self.strategy = strategy
        self.completed = []
        
        if message:
            super().__init__(message)
        else:
            base_msg = f"File conflict: {filepath}"
            if strategy:
                base_msg += f" (strategy: {strategy})"
            super().__init__(base_msg)


class RenameBatchError(OSError):
    """
    Raised when a rename fails part-way through a batch.

    Renames already performed are not rolled back; they are carried in
    ``completed`` so the caller can report them. The original OSError is
    chained as ``__cause__``.
    """

    def __init__(self, source, target, completed=None, message=None):
        self.source = source
        self.target = target
        self.completed = list(completed or [])

        if message:
            super().__init__(message)
        else:
            super().__init__(f"Failed to rename {source} -> {target}")


# End of file #
