from __future__ import annotations

import io
from typing import Sequence

import pandas as pd


def render_sheet_xlsx(header: Sequence[str], body: Sequence[Sequence[object]], *, sheet_name: str) -> bytes:
    df = pd.DataFrame([list(row) for row in body], columns=list(header))

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    return output.getvalue()
