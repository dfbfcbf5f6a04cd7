import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import simple_history.models
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('stores', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='ProductAttribute',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(help_text='Chave estável usada internamente (ex: "tamanho")', max_length=100, verbose_name='Nome interno')),
                ('label', models.CharField(max_length=100, verbose_name='Rótulo')),
                ('is_variation', models.BooleanField(default=False, verbose_name='Gera variações')),
                ('is_required', models.BooleanField(default=False, verbose_name='Obrigatório')),
                ('position', models.PositiveIntegerField(default=0, verbose_name='Posição')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Atualizado em')),
                ('store', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='product_attributes', to='stores.store', verbose_name='Loja')),
            ],
            options={
                'verbose_name': 'Atributo de Produto',
                'verbose_name_plural': 'Atributos de Produto',
                'ordering': ['position', 'name'],
            },
        ),
        migrations.CreateModel(
            name='ProductAttributeOption',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('value', models.CharField(max_length=100, verbose_name='Valor')),
                ('position', models.PositiveIntegerField(default=0, verbose_name='Posição')),
                ('attribute', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='options', to='catalog.productattribute', verbose_name='Atributo')),
            ],
            options={
                'verbose_name': 'Opção de Atributo',
                'verbose_name_plural': 'Opções de Atributos',
                'ordering': ['position', 'value'],
            },
        ),
        migrations.AddConstraint(
            model_name='productattributeoption',
            constraint=models.UniqueConstraint(fields=('attribute', 'value'), name='unique_attribute_option_value'),
        ),
        migrations.CreateModel(
            name='ProductColumn',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('field_name', models.CharField(help_text='Nome do campo do produto exibido por esta coluna', max_length=50, verbose_name='Campo')),
                ('label', models.CharField(max_length=100, verbose_name='Rótulo')),
                ('is_visible', models.BooleanField(default=True, verbose_name='Visível')),
                ('is_editable', models.BooleanField(default=True, verbose_name='Editável')),
                ('column_type', models.CharField(choices=[('text', 'Texto'), ('number', 'Número'), ('currency', 'Moeda'), ('date', 'Data'), ('textarea', 'Texto longo'), ('select', 'Lista de opções')], default='text', max_length=20, verbose_name='Tipo')),
                ('width', models.CharField(default='auto', max_length=20, verbose_name='Largura')),
                ('position', models.PositiveIntegerField(default=0, verbose_name='Posição')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Atualizado em')),
                ('store', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='product_columns', to='stores.store', verbose_name='Loja')),
            ],
            options={
                'verbose_name': 'Coluna de Produto',
                'verbose_name_plural': 'Colunas de Produto',
                'ordering': ['position', 'label'],
            },
        ),
        migrations.AddConstraint(
            model_name='productcolumn',
            constraint=models.UniqueConstraint(fields=('store', 'field_name'), name='unique_store_column_field'),
        ),
        migrations.CreateModel(
            name='ProductColumnOption',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('value', models.CharField(max_length=255, verbose_name='Valor')),
                ('position', models.PositiveIntegerField(default=0, verbose_name='Posição')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Atualizado em')),
                ('column', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='options', to='catalog.productcolumn', verbose_name='Coluna')),
            ],
            options={
                'verbose_name': 'Opção de Coluna',
                'verbose_name_plural': 'Opções de Colunas',
                'ordering': ['position'],
            },
        ),
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('codigo', models.CharField(max_length=100, verbose_name='Código')),
                ('name', models.CharField(max_length=255, verbose_name='Nome')),
                ('marca', models.CharField(blank=True, default='', max_length=100, verbose_name='Marca')),
                ('categoria', models.CharField(blank=True, default='', max_length=100, verbose_name='Categoria')),
                ('subcategoria', models.CharField(blank=True, default='', max_length=100, verbose_name='Subcategoria')),
                ('grupo', models.CharField(blank=True, default='', max_length=100, verbose_name='Grupo')),
                ('subgrupo', models.CharField(blank=True, default='', max_length=100, verbose_name='Subgrupo')),
                ('departamento', models.CharField(blank=True, default='', max_length=100, verbose_name='Departamento')),
                ('secao', models.CharField(blank=True, default='', max_length=100, verbose_name='Seção')),
                ('estacao', models.CharField(blank=True, default='', max_length=100, verbose_name='Estação')),
                ('colecao', models.CharField(blank=True, default='', max_length=100, verbose_name='Coleção')),
                ('descricao', models.TextField(blank=True, default='', verbose_name='Descrição')),
                ('observacao', models.TextField(blank=True, default='', verbose_name='Observação')),
                ('fabricante', models.CharField(blank=True, default='', max_length=100, verbose_name='Fabricante')),
                ('fornecedor', models.CharField(blank=True, default='', max_length=100, verbose_name='Fornecedor')),
                ('ncm', models.CharField(blank=True, default='', max_length=10, verbose_name='NCM')),
                ('cest', models.CharField(blank=True, default='', max_length=9, verbose_name='CEST')),
                ('custo', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Custo')),
                ('preco1', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Preço 1')),
                ('preco2', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Preço 2')),
                ('preco3', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Preço 3')),
                ('stock', models.IntegerField(default=0, verbose_name='Estoque')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Atualizado em')),
                ('store', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='products', to='stores.store', verbose_name='Loja')),
            ],
            options={
                'verbose_name': 'Produto',
                'verbose_name_plural': 'Produtos',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['store', 'name'], name='product_store_name_idx')],
            },
        ),
        migrations.AddConstraint(
            model_name='product',
            constraint=models.UniqueConstraint(fields=('store', 'codigo'), name='unique_store_product_codigo'),
        ),
        migrations.CreateModel(
            name='HistoricalProduct',
            fields=[
                ('id', models.UUIDField(db_index=True, default=uuid.uuid4, editable=False)),
                ('codigo', models.CharField(max_length=100, verbose_name='Código')),
                ('name', models.CharField(max_length=255, verbose_name='Nome')),
                ('marca', models.CharField(blank=True, default='', max_length=100, verbose_name='Marca')),
                ('categoria', models.CharField(blank=True, default='', max_length=100, verbose_name='Categoria')),
                ('subcategoria', models.CharField(blank=True, default='', max_length=100, verbose_name='Subcategoria')),
                ('grupo', models.CharField(blank=True, default='', max_length=100, verbose_name='Grupo')),
                ('subgrupo', models.CharField(blank=True, default='', max_length=100, verbose_name='Subgrupo')),
                ('departamento', models.CharField(blank=True, default='', max_length=100, verbose_name='Departamento')),
                ('secao', models.CharField(blank=True, default='', max_length=100, verbose_name='Seção')),
                ('estacao', models.CharField(blank=True, default='', max_length=100, verbose_name='Estação')),
                ('colecao', models.CharField(blank=True, default='', max_length=100, verbose_name='Coleção')),
                ('descricao', models.TextField(blank=True, default='', verbose_name='Descrição')),
                ('observacao', models.TextField(blank=True, default='', verbose_name='Observação')),
                ('fabricante', models.CharField(blank=True, default='', max_length=100, verbose_name='Fabricante')),
                ('fornecedor', models.CharField(blank=True, default='', max_length=100, verbose_name='Fornecedor')),
                ('ncm', models.CharField(blank=True, default='', max_length=10, verbose_name='NCM')),
                ('cest', models.CharField(blank=True, default='', max_length=9, verbose_name='CEST')),
                ('custo', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Custo')),
                ('preco1', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Preço 1')),
                ('preco2', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Preço 2')),
                ('preco3', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Preço 3')),
                ('stock', models.IntegerField(default=0, verbose_name='Estoque')),
                ('created_at', models.DateTimeField(blank=True, editable=False, verbose_name='Criado em')),
                ('updated_at', models.DateTimeField(blank=True, editable=False, verbose_name='Atualizado em')),
                ('history_id', models.AutoField(primary_key=True, serialize=False)),
                ('history_date', models.DateTimeField(db_index=True)),
                ('history_change_reason', models.CharField(max_length=100, null=True)),
                ('history_type', models.CharField(choices=[('+', 'Created'), ('~', 'Changed'), ('-', 'Deleted')], max_length=1)),
                ('history_user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('store', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='stores.store', verbose_name='Loja')),
            ],
            options={
                'verbose_name': 'historical Produto',
                'verbose_name_plural': 'historical Produtos',
                'ordering': ('-history_date', '-history_id'),
                'get_latest_by': ('history_date', 'history_id'),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name='ProductVariation',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('value', models.CharField(blank=True, default='', max_length=100, verbose_name='Valor')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('attribute', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='legacy_variations', to='catalog.productattribute', verbose_name='Atributo')),
                ('attribute_option', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='product_variations', to='catalog.productattributeoption', verbose_name='Opção de Atributo')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='product_variations', to='catalog.product', verbose_name='Produto')),
            ],
            options={
                'verbose_name': 'Variação do Produto',
                'verbose_name_plural': 'Variações dos Produtos',
                'ordering': ['created_at'],
            },
        ),
        migrations.AddConstraint(
            model_name='productvariation',
            constraint=models.CheckConstraint(condition=models.Q(('attribute_option__isnull', False), models.Q(('attribute__isnull', False), models.Q(('value', ''), _negated=True)), _connector='OR'), name='product_variation_option_or_legacy'),
        ),
        migrations.AddConstraint(
            model_name='productvariation',
            constraint=models.UniqueConstraint(condition=models.Q(('attribute_option__isnull', False)), fields=('product', 'attribute_option'), name='unique_product_attribute_option'),
        ),
    ]
