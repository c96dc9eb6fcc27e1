"""
Bakehouse Views.

Printable bake sheet: the batches of a day and the ingredients
they consume, flagged when the pantry runs short.
"""

from datetime import date

from django.contrib.admin.views.decorators import staff_member_required
from django.shortcuts import render
from django.utils import timezone

from bakehouse.service import bakery


@staff_member_required
def bake_sheet_view(request):
    """
    View to display the bake sheet of a day (?date=YYYY-MM-DD, default today).
    """
    date_str = request.GET.get("date")
    if date_str:
        try:
            target_date = date.fromisoformat(date_str)
        except ValueError:
            target_date = timezone.localdate()
    else:
        target_date = timezone.localdate()

    sheet = bakery.bake_sheet(target_date)

    context = {
        "title": f"Bake sheet {target_date.strftime('%m/%d/%Y')}",
        "target_date": target_date,
        "batches": sheet["batches"],
        "requirements": sheet["requirements"],
        "has_shortages": any(not req.sufficient for req in sheet["requirements"]),
    }

    return render(request, "bakehouse/bake_sheet.html", context)
