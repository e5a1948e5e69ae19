"""Product management back-office service.

Attribute value suggestions and the product create/edit form.
"""
