from codecollector.io.readers import SourceReader
from codecollector.io.staging import StagingFile
from codecollector.io.walker import FileWalker

__all__ = ['FileWalker', 'SourceReader', 'StagingFile']
