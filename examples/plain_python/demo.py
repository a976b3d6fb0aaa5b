"""
Plain Python demo showing the xls_stream writer.

This example demonstrates:
1. Writing a document with the module-level functions
2. The document() context manager with a strict writer
3. A callback sink distinguishing outputs by its context value

Run this script to produce demo1.xls, demo2.xls and demo3.xls.
"""

from xls_stream import (
    CallbackSink,
    FileSink,
    ResultCode,
    XLSWriter,
    add_label_cell,
    add_number_cell,
    begin_document,
    document,
    finish_document,
    set_column_width,
)


# Example 1: Module-level functions
def write_price_list(path):
    prices = [(b"Apples", 1.25), (b"Pears", 0.8), (b"Cherries", 4.5)]

    with FileSink(path) as sink:
        w = XLSWriter(sink)
        begin_document(w)
        set_column_width(w, 0, 256 * 16)
        add_label_cell(w, 0, 0, b"Item")
        add_label_cell(w, 0, 1, b"Price")
        for row, (name, price) in enumerate(prices, start=1):
            add_label_cell(w, row, 0, name)
            add_number_cell(w, row, 1, price)
        finish_document(w)


# Example 2: document() context manager on a strict writer
def write_squares(path):
    with XLSWriter(FileSink(path), strict=True) as w:
        with document(w):
            for n in range(100):
                w.add_number_cell(n, 0, n)
                w.add_number_cell(n, 1, n * n)


# Example 3: One callback serving an open file through its context value
def write_to_file(ptr, data):
    try:
        ptr.write(data)
    except OSError:
        return ResultCode.IO_ERROR
    return ResultCode.SUCCESS


def write_with_callback(path):
    with open(path, "wb") as f:
        w = XLSWriter(CallbackSink(write_to_file, f))
        with document(w):
            # Text must be encoded before it is written
            w.add_label_cell(0, 0, "Café".encode("cp1252"))


if __name__ == "__main__":
    write_price_list("demo1.xls")
    write_squares("demo2.xls")
    write_with_callback("demo3.xls")
    print("Wrote demo1.xls, demo2.xls and demo3.xls")
