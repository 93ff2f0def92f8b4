from .batch import BatchResult, UploadBatch, collect_headers, collect_records, process_batch
