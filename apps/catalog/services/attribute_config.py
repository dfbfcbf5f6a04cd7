"""
Configuration store for the dynamic product schema: variation attributes with
their options, and the product-table columns with their select options.
Everything is scoped by store.
"""

import logging
from typing import Any, Dict, Iterable, List, NamedTuple, Optional

from django.db import DatabaseError, transaction
from django.db.models import Max, Prefetch, QuerySet
from rest_framework.exceptions import ValidationError

from apps.catalog.models import (
    Product,
    ProductAttribute,
    ProductAttributeOption,
    ProductColumn,
    ProductColumnOption,
)
from apps.core.exceptions import NotFoundOrUnauthorized

logger = logging.getLogger(__name__)

ATTRIBUTE_MUTABLE_FIELDS = ('name', 'label', 'is_variation', 'is_required')

# field_name is fixed once the column exists
COLUMN_MUTABLE_FIELDS = (
    'label', 'is_visible', 'is_editable', 'column_type', 'width', 'position',
)

COLUMN_OPTION_MUTABLE_FIELDS = ('value', 'position')


class AttributeCreation(NamedTuple):
    """Attribute row plus warnings for option rows that could not be stored."""
    attribute: ProductAttribute
    warnings: List[str]


def _apply_fields(instance, fields: Dict[str, Any], allowed: Iterable[str]) -> List[str]:
    changed = []
    for name in allowed:
        if name in fields:
            setattr(instance, name, fields[name])
            changed.append(name)
    return changed


class AttributeConfigService:
    """
    CRUD for ProductAttribute / ProductAttributeOption and
    ProductColumn / ProductColumnOption.
    """

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    @staticmethod
    def list_attributes(store) -> QuerySet:
        """Attributes ordered by position, each with its options by position."""
        return ProductAttribute.objects.filter(store=store).prefetch_related(
            Prefetch(
                'options',
                queryset=ProductAttributeOption.objects.order_by('position', 'value')
            )
        ).order_by('position', 'name')

    @staticmethod
    def get_attribute(store, attribute_id) -> ProductAttribute:
        attribute = AttributeConfigService.list_attributes(store).filter(
            pk=attribute_id
        ).first()
        if attribute is None:
            raise NotFoundOrUnauthorized('Attribute not found')
        return attribute

    @staticmethod
    def create_attribute(
        store,
        name: str,
        label: str,
        is_variation: bool = False,
        is_required: bool = False,
        options: Optional[List[str]] = None,
        position: int = 0,
    ) -> AttributeCreation:
        """
        Insert the attribute, then its options positioned by list index.

        A failed option insert does not undo the attribute: it is logged and
        returned as a warning.
        """
        warnings = []

        attribute = ProductAttribute.objects.create(
            store=store,
            name=name,
            label=label,
            is_variation=is_variation,
            is_required=is_required,
            position=position,
        )

        values = [str(v).strip() for v in options or []]
        values = [v for v in values if v]

        if values:
            try:
                with transaction.atomic():
                    ProductAttributeOption.objects.bulk_create([
                        ProductAttributeOption(
                            attribute=attribute,
                            value=value,
                            position=index,
                        )
                        for index, value in enumerate(values)
                    ])
            except DatabaseError as e:
                logger.warning(
                    f"Error creating options for attribute {attribute.id} ({attribute.name}): {e}"
                )
                warnings.append(
                    f"Atributo '{attribute.name}' criado, mas as opções não foram salvas: {e}"
                )

        logger.info(f"Attribute created: {attribute.name} ({attribute.id}) store={store.id}")
        return AttributeCreation(
            AttributeConfigService.get_attribute(store, attribute.pk),
            warnings
        )

    @staticmethod
    def update_attribute(store, attribute_id, fields: Dict[str, Any]) -> ProductAttribute:
        """Only name, label, is_variation and is_required are written."""
        attribute = ProductAttribute.objects.filter(pk=attribute_id, store=store).first()
        if attribute is None:
            raise NotFoundOrUnauthorized('Attribute not found')

        changed = _apply_fields(attribute, fields, ATTRIBUTE_MUTABLE_FIELDS)
        if changed:
            attribute.save(update_fields=changed + ['updated_at'])

        return AttributeConfigService.get_attribute(store, attribute.pk)

    @staticmethod
    def delete_attribute(store, attribute_id) -> None:
        """Options and variation links go with it through FK cascade."""
        deleted, details = ProductAttribute.objects.filter(
            pk=attribute_id, store=store
        ).delete()
        if not deleted:
            raise NotFoundOrUnauthorized('Attribute not found')
        logger.info(f"Attribute {attribute_id} deleted store={store.id}: {details}")

    # -------------------------------------------------------------------------
    # Columns
    # -------------------------------------------------------------------------

    @staticmethod
    def list_columns(store) -> QuerySet:
        return ProductColumn.objects.filter(store=store).order_by('position', 'label')

    @staticmethod
    def get_column(store, column_id) -> ProductColumn:
        column = ProductColumn.objects.filter(pk=column_id, store=store).first()
        if column is None:
            raise NotFoundOrUnauthorized('Column not found')
        return column

    @staticmethod
    def create_column(store, data: Dict[str, Any]) -> ProductColumn:
        field_name = data.get('field_name')
        label = data.get('label')

        if not field_name or not label:
            raise ValidationError('field_name and label are required')

        if field_name not in Product.column_field_names():
            raise ValidationError(f"Campo '{field_name}' não existe no produto")

        if ProductColumn.objects.filter(store=store, field_name=field_name).exists():
            raise ValidationError(f"Já existe uma coluna para o campo '{field_name}'")

        column = ProductColumn.objects.create(
            store=store,
            field_name=field_name,
            label=label,
            is_visible=data.get('is_visible', True),
            is_editable=data.get('is_editable', True),
            column_type=data.get('column_type') or 'text',
            width=data.get('width') or 'auto',
            position=data.get('position', 0),
        )
        logger.info(f"Column created: {column.field_name} ({column.id}) store={store.id}")
        return column

    @staticmethod
    def update_column(store, column_id, fields: Dict[str, Any]) -> ProductColumn:
        column = AttributeConfigService.get_column(store, column_id)

        changed = _apply_fields(column, fields, COLUMN_MUTABLE_FIELDS)
        if changed:
            column.save(update_fields=changed + ['updated_at'])
        return column

    @staticmethod
    def delete_column(store, column_id) -> None:
        deleted, _ = ProductColumn.objects.filter(pk=column_id, store=store).delete()
        if not deleted:
            raise NotFoundOrUnauthorized('Column not found')

    # -------------------------------------------------------------------------
    # Column options
    # -------------------------------------------------------------------------

    @staticmethod
    def list_column_options(store, column_id=None) -> List[ProductColumnOption]:
        """
        Options of one column, or of every column of the store when no
        column is given. A store without columns yields an empty list.
        """
        if column_id:
            return list(
                ProductColumnOption.objects.filter(
                    column_id=column_id,
                    column__store=store
                ).order_by('position')
            )

        column_ids = list(
            ProductColumn.objects.filter(store=store).values_list('id', flat=True)
        )
        if not column_ids:
            return []

        return list(
            ProductColumnOption.objects.filter(
                column_id__in=column_ids
            ).order_by('position')
        )

    @staticmethod
    def add_column_option(store, column_id, value) -> ProductColumnOption:
        """
        Append an option at max(position) + 1, or 0 for the first one.

        The read of the current max and the insert are not serialized:
        two concurrent calls can end up with the same position.
        """
        value = str(value).strip() if value is not None else ''
        if not column_id or not value:
            raise ValidationError('columnId and value are required')

        column = AttributeConfigService.get_column(store, column_id)

        current_max = ProductColumnOption.objects.filter(column=column).aggregate(
            max_position=Max('position')
        )['max_position']
        next_position = 0 if current_max is None else current_max + 1

        return ProductColumnOption.objects.create(
            column=column,
            value=value,
            position=next_position,
        )

    @staticmethod
    def get_column_option(store, option_id) -> ProductColumnOption:
        option = ProductColumnOption.objects.filter(
            pk=option_id,
            column__store=store
        ).first()
        if option is None:
            raise NotFoundOrUnauthorized('Column option not found')
        return option

    @staticmethod
    def update_column_option(store, option_id, fields: Dict[str, Any]) -> ProductColumnOption:
        option = AttributeConfigService.get_column_option(store, option_id)

        if 'value' in fields:
            fields = dict(fields, value=str(fields['value']).strip())
            if not fields['value']:
                raise ValidationError('value is required')

        changed = _apply_fields(option, fields, COLUMN_OPTION_MUTABLE_FIELDS)
        if changed:
            option.save(update_fields=changed + ['updated_at'])
        return option

    @staticmethod
    def delete_column_option(store, option_id) -> None:
        option = AttributeConfigService.get_column_option(store, option_id)
        option.delete()

    # -------------------------------------------------------------------------
    # Combined read for the product settings screen
    # -------------------------------------------------------------------------

    @staticmethod
    def product_data(store) -> Dict[str, QuerySet]:
        return {
            'attributes': AttributeConfigService.list_attributes(store),
            'columns': AttributeConfigService.list_columns(store),
        }
