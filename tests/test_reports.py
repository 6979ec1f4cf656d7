import tempfile
import unittest
from pathlib import Path

import pandas as pd
from scipy.io import loadmat

from csv_analyzer.core import queries
from csv_analyzer.core.reports import aggregate_frame, columns_frame, unique_frame, write_report
from csv_analyzer.loaders.csv_loader import parse_table


class ReportTests(unittest.TestCase):
    def setUp(self):
        self.table = parse_table("a,b\n1,x\n2,y\n3,x\n")

    def test_frames(self):
        cols = columns_frame(queries.list_columns(self.table))
        self.assertEqual([["a", "number"], ["b", "text"]], cols.values.tolist())

        uniq = unique_frame("b", queries.unique(self.table, "b"))
        self.assertEqual(3, int(uniq["count"].sum()))

        agg = aggregate_frame("a", "avg", 2.0)
        self.assertEqual(["column", "stat", "value"], list(agg.columns))

    def test_write_both_formats(self):
        df_out = unique_frame("b", queries.unique(self.table, "b"))
        with tempfile.TemporaryDirectory() as tmpdir:
            out_base = Path(tmpdir) / "nested" / "report"
            written = write_report(df_out, out_base, "unique b", fmt="both", mat_variable="uniq")

            self.assertEqual([out_base.with_suffix(".csv"), out_base.with_suffix(".mat")], written)
            df_csv = pd.read_csv(written[0])
            self.assertEqual(["x", "y"], df_csv["value"].tolist())

            mat = loadmat(written[1], squeeze_me=True, struct_as_record=False)
            uniq = mat["uniq"]
            self.assertEqual([2.0, 1.0], list(uniq.count))
            self.assertEqual(["x", "y"], list(uniq.value))

    def test_unknown_format(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(ValueError):
                write_report(aggregate_frame("a", "min", 1.0), Path(tmpdir) / "r", "min a", fmt="xlsx")


if __name__ == "__main__":
    unittest.main()
