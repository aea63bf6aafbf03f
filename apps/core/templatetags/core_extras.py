from django import template

from apps.goals.domain.forecast import percentage_change as format_change

register = template.Library()

STATUS_BADGES = {
    'completed': 'bg-success',
    'on_track': 'bg-primary',
    'at_risk': 'bg-warning text-dark',
    'behind': 'bg-danger',
}


@register.filter
def currency(value):
    """1234.56 -> $1,235"""
    if value in (None, ''):
        return ''
    return f"${float(value):,.0f}"


@register.filter
def status_badge(status):
    # Enum albo zwykły string
    key = getattr(status, 'value', status)
    return STATUS_BADGES.get(key, 'bg-secondary')


@register.filter
def percentage_change(value, previous):
    """{{ projected|percentage_change:target }} -> +12.5%"""
    if value in (None, '') or previous in (None, ''):
        return ''
    return format_change(float(value), float(previous))
