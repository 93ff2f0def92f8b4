from .excel_writer import columns_for, rows_to_xlsx_bytes, write_rows_to_xlsx
from .naming import export_filename
from .text_writer import headers_to_text, write_headers_txt
