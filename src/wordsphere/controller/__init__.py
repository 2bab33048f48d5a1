"""
The CONTROLLER layer drives the label collection over time.
It may use the model freely but does not create widgets.
"""
