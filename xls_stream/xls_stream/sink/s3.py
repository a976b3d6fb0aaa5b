"""
S3 sink implementation with a local spool file.

Records are streamed to a spool file on local disk as they are written,
then the finished document is uploaded to S3 on close().
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

from ..errors import SinkIOError
from .local import StreamSink

logger = logging.getLogger(__name__)


class S3Sink(StreamSink):
    """
    Writes a document to S3 via a local spool file.

    Strategy:
    1. Stream records to a spool file (no document held in memory)
    2. Upload the spool file to s3://{bucket}/{key} on close()
    3. Optionally delete the spool file after a successful upload
    """

    def __init__(
        self,
        bucket: str,
        key: str,
        *,
        spool_dir: Optional[str] = None,
        keep_local: bool = False,
        client: Any = None,
    ):
        """
        Initialize S3 sink.

        Args:
            bucket: S3 bucket name
            key: Object key of the uploaded document
            spool_dir: Directory for the spool file (system temp dir if None)
            keep_local: Whether to keep the spool file after upload or abort
            client: Preconfigured S3 client; a boto3 client is created if None
        """
        self.bucket = bucket
        self.key = key
        self.keep_local = keep_local
        if spool_dir is not None:
            Path(spool_dir).mkdir(parents=True, exist_ok=True)
        fd, spool_path = tempfile.mkstemp(suffix=".xls", dir=spool_dir)
        self.spool_path = Path(spool_path)
        self.uploaded = False
        self.aborted = False

        # Lazy import boto3 (only needed if no client was injected)
        self._s3_client = client

        super().__init__(os.fdopen(fd, "wb"), context=f"s3://{bucket}/{key}")

    @property
    def s3_client(self):
        """Lazy initialize S3 client."""
        if self._s3_client is None:
            try:
                import boto3
            except ImportError:
                raise ImportError(
                    "boto3 is required for S3Sink. Install with: pip install xls-stream[s3]"
                )
            self._s3_client = boto3.client('s3')
        return self._s3_client

    def close(self) -> None:
        """
        Close the spool file and upload it to S3.
        """
        if self.uploaded or self.aborted:
            return
        if not self.stream.closed:
            self.stream.close()
        self._upload()

    def abort(self) -> None:
        """
        Close the spool file without uploading it.

        The spool file is deleted unless keep_local is set.
        """
        if self.uploaded or self.aborted:
            return
        if not self.stream.closed:
            self.stream.close()
        self.aborted = True
        logger.warning(f"Discarded document for s3://{self.bucket}/{self.key}")

        if not self.keep_local:
            self.spool_path.unlink()

    def _upload(self) -> None:
        try:
            self.s3_client.upload_file(str(self.spool_path), self.bucket, self.key)
        except Exception as e:
            # Keep the spool file so the document is not lost
            logger.error(f"Failed to upload {self.spool_path} to s3://{self.bucket}/{self.key}: {e}")
            raise SinkIOError(f"Failed to upload to s3://{self.bucket}/{self.key}: {e}") from e

        self.uploaded = True
        logger.info(f"Uploaded {self.bytes_written} bytes to s3://{self.bucket}/{self.key}")

        if not self.keep_local:
            self.spool_path.unlink()
