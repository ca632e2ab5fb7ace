"""View models: AJAX link options and pager link formatting"""
