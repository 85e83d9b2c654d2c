from django.core.exceptions import ValidationError


def validate_choice_fields(instance, exclude=()):
    """
    Reject any enumerated field whose value is outside its declared choices.

    Called from ``save()`` so out-of-set values never reach the table, even
    when the write does not go through a form or serializer.
    """
    errors = {}
    for field in instance._meta.concrete_fields:
        if not field.choices or field.name in exclude:
            continue
        value = getattr(instance, field.attname)
        if value in field.empty_values and field.blank:
            continue
        try:
            field.validate(value, instance)
        except ValidationError as e:
            errors[field.name] = e.messages
    if errors:
        raise ValidationError(errors)
