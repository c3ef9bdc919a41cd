"""
Printable report of a risk assessment: plain text for printing and a PDF built
with reportlab. Both read the assessment; neither modifies it.
"""
from datetime import datetime
from io import BytesIO
from typing import List, Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.colors import HexColor
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from .classifier import RiskLevel
from .scoring import RiskAssessment

DISCLAIMER = ("This report is for clinical decision support only and should not "
              "replace clinical judgment.")

RISK_COLORS = {
    RiskLevel.HIGH: "#dc2626",
    RiskLevel.MEDIUM: "#d97706",
    RiskLevel.LOW: "#16a34a",
}


def risk_headline(assessment: RiskAssessment) -> str:
    return (f"DIABETES RISK: {assessment.risk_percentage}% "
            f"({assessment.risk_level.value.upper()} RISK)")


def render_text_report(assessment: RiskAssessment, generated_at: Optional[datetime] = None) -> str:
    generated_at = generated_at or datetime.now()
    lines: List[str] = [
        "DIABETES RISK ASSESSMENT REPORT",
        "=" * 31,
        risk_headline(assessment),
        f"Model Used: {assessment.model_used}",
        f"Model Confidence: {assessment.confidence}%",
        f"Analysis Date: {generated_at.strftime('%Y-%m-%d')}",
        "",
        "CLINICAL ANALYSIS",
        assessment.analysis.summary,
        assessment.analysis.clinical_significance,
    ]
    if assessment.analysis.key_findings:
        lines.append("Key findings:")
        lines.extend(f"  - {f}" for f in assessment.analysis.key_findings)

    lines += ["", "CLINICAL RECOMMENDATIONS"]
    for category in assessment.recommendations:
        lines.append(f"{category.category}:")
        lines.extend(f"  • {item}" for item in category.items)

    plan = assessment.follow_up
    lines += [
        "",
        "FOLLOW-UP PLAN",
        f"Next appointment: {plan.next_appointment}",
        "Monitoring: " + "; ".join(plan.monitoring),
        "Interventions: " + "; ".join(plan.interventions),
        "Goals: " + "; ".join(plan.goals),
        "",
        "LIMITATIONS",
    ]
    lines.extend(f"  - {item}" for item in assessment.analysis.limitations)
    lines += ["", DISCLAIMER]
    return "\n".join(lines) + "\n"


def build_pdf_report(assessment: RiskAssessment, generated_at: Optional[datetime] = None) -> BytesIO:
    generated_at = generated_at or datetime.now()
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=letter,
        topMargin=0.5 * inch,
        bottomMargin=0.5 * inch,
        title="Diabetes Risk Assessment Report",
    )
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "ReportTitle",
        parent=styles["Heading1"],
        fontSize=20,
        textColor=HexColor("#1e3a5f"),
        alignment=TA_CENTER,
        spaceAfter=12,
    )
    heading_style = ParagraphStyle(
        "ReportHeading",
        parent=styles["Heading2"],
        fontSize=13,
        textColor=HexColor("#1e3a5f"),
        spaceBefore=12,
        spaceAfter=6,
    )
    risk_style = ParagraphStyle(
        "RiskHeadline",
        parent=styles["Heading2"],
        textColor=HexColor(RISK_COLORS[assessment.risk_level]),
        alignment=TA_CENTER,
    )
    normal = styles["Normal"]

    story = [
        Paragraph("Diabetes Risk Assessment Report", title_style),
        Paragraph(escape(risk_headline(assessment)), risk_style),
        Spacer(1, 0.2 * inch),
    ]

    meta = Table([
        ["Model Used:", assessment.model_used],
        ["Model Confidence:", f"{assessment.confidence}%"],
        ["Analysis Date:", generated_at.strftime("%m/%d/%Y")],
    ], colWidths=[1.8 * inch, 4 * inch])
    meta.setStyle(TableStyle([
        ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 10),
        ("TEXTCOLOR", (0, 0), (0, -1), colors.grey),
    ]))
    story.append(meta)

    story.append(Paragraph("CLINICAL ANALYSIS", heading_style))
    story.append(Paragraph(escape(assessment.analysis.summary), normal))
    story.append(Paragraph(escape(assessment.analysis.clinical_significance), normal))
    for finding in assessment.analysis.key_findings:
        story.append(Paragraph(f"• {escape(finding)}", normal))

    story.append(Paragraph("CLINICAL RECOMMENDATIONS", heading_style))
    for category in assessment.recommendations:
        story.append(Paragraph(f"<b>{escape(category.category)}</b>", normal))
        for item in category.items:
            story.append(Paragraph(f"• {escape(item)}", normal))
        story.append(Spacer(1, 0.1 * inch))

    plan = assessment.follow_up
    story.append(Paragraph("FOLLOW-UP PLAN", heading_style))
    story.append(Paragraph(f"Next appointment: {escape(plan.next_appointment)}", normal))
    for label, items in (("Monitoring", plan.monitoring), ("Interventions", plan.interventions),
                         ("Goals", plan.goals)):
        story.append(Paragraph(f"<b>{label}:</b> {escape('; '.join(items))}", normal))

    story.append(Spacer(1, 0.4 * inch))
    story.append(Paragraph(f'<font size="8" color="#666666">{escape(DISCLAIMER)}</font>', normal))

    doc.build(story)
    buffer.seek(0)
    return buffer
