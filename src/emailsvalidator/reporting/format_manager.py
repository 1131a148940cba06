class FormatManager:
    def __init__(self, workbook):
        self.workbook = workbook

        self.header_format = self.create_format({
            "bold": True,
            "bottom": 1,
        })

        self.data_cell_format = self.create_format({
            "valign": "top",
            "text_wrap": True,
        })

        # Rejected rows, muted so they read as diagnostics
        self.rejected_cell_format = self.create_format({
            "valign": "top",
            "font_color": "#666666",
        })

    def create_format(self, properties):
        return self.workbook.add_format(properties)
