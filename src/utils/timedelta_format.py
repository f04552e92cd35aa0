from datetime import timedelta

def format_timedelta(td: 'timedelta') -> str:
    """Format timedelta as 'Xd Yh', 'Xh Ym Zs', 'Ym Zs' or 'Zs'."""
    total_seconds = max(int(td.total_seconds()), 0)
    days, remainder = divmod(total_seconds, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, seconds = divmod(remainder, 60)

    if days > 0:
        return f"{days}d {hours}h"
    elif hours > 0:
        return f"{hours}h {minutes}m {seconds}s"
    elif minutes > 0:
        return f"{minutes}m {seconds}s"
    else:
        return f"{seconds}s"
