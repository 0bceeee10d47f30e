from pathlib import Path

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from core.reporting.contexts import RouteExportContext


class PdfRouteRenderer:
    def render(self, ctx: RouteExportContext, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        doc = SimpleDocTemplate(
            str(output_path),
            pagesize=A4,
            leftMargin=40,
            rightMargin=40,
            topMargin=40,
            bottomMargin=40,
        )

        styles = getSampleStyleSheet()
        story = []

        # ---------------- Title ----------------
        story.append(Paragraph(f"Route Sheet - {ctx.title}", styles["Title"]))
        story.append(Paragraph(
            f"Technician: {ctx.technician or 'All Technicians'} | As of {ctx.as_of.isoformat()}",
            styles["Normal"],
        ))
        story.append(Spacer(1, 12))

        # ---------------- Stops ----------------
        plan = ctx.plan
        legs = plan.summary.legs if plan.summary else []
        data = [["Stop", "Task", "Address", "Miles to next"]]
        for index, location in enumerate(plan.route):
            miles = f"{legs[index].miles:.1f}" if index < len(legs) else "-"
            data.append([index, location.label, location.address or "No address", miles])

        table = Table(data, colWidths=[40, 180, 200, 90])
        table.setStyle(TableStyle([
            ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ("ALIGN", (3, 1), (3, -1), "RIGHT"),
        ]))
        story.append(table)
        story.append(Spacer(1, 16))

        # ---------------- Summary ----------------
        if plan.summary is not None:
            story.append(Paragraph("Route Summary", styles["Heading2"]))
            for line in (
                f"Total stops: {plan.summary.stop_count}",
                f"Total distance: {plan.summary.total_miles:.1f} miles",
                f"Est. travel time: {plan.summary.travel_hours:.1f} hours",
                f"Est. service time: {plan.summary.service_hours:.1f} hours",
                f"Total time: {plan.summary.total_hours:.1f} hours",
            ):
                story.append(Paragraph(line, styles["Normal"]))

        doc.build(story)
        return output_path
