"""
Migration inicial para o domínio de Pessoas.

Cria a tabela:
- pessoas: clientes e técnicos (discriminados por `tipo`)
"""

from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='PessoaModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único da pessoa'
                )),
                ('tipo', models.CharField(
                    max_length=10,
                    choices=[
                        ('CLIENTE', 'Cliente'),
                        ('TECNICO', 'Técnico'),
                    ],
                    db_index=True,
                    help_text='Cliente ou técnico'
                )),
                ('nome', models.CharField(
                    max_length=100,
                    help_text='Nome completo'
                )),
                ('cpf', models.CharField(
                    max_length=11,
                    unique=True,
                    help_text='CPF (apenas dígitos)'
                )),
                ('email', models.EmailField(
                    max_length=254,
                    unique=True,
                    help_text='E-mail (minúsculas)'
                )),
                ('senha_hash', models.CharField(
                    max_length=128,
                    help_text='Hash da senha'
                )),
                ('perfis', models.JSONField(
                    default=list,
                    blank=True,
                    help_text='Perfis (ADMIN, CLIENTE, TECNICO)'
                )),
                ('criado_em', models.DateTimeField(
                    default=django.utils.timezone.now,
                    help_text='Data/hora de criação'
                )),
            ],
            options={
                'verbose_name': 'Pessoa',
                'verbose_name_plural': 'Pessoas',
                'db_table': 'pessoas',
                'ordering': ['nome'],
                'indexes': [
                    models.Index(fields=['tipo', 'nome'], name='pessoas_tipo_nome_idx'),
                ],
            },
        ),
    ]
