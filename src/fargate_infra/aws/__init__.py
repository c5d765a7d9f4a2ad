from .controller import find_orphaned_log_buckets, list_log_buckets, log_bucket_prefix

__all__ = ["find_orphaned_log_buckets", "list_log_buckets", "log_bucket_prefix"]
