"""
Migration inicial para o domínio de Chamados.

Cria a tabela:
- chamados: chamados de suporte, com FKs protegidas para pessoas
"""

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
        ('pessoas', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ChamadoModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do chamado'
                )),
                ('titulo', models.CharField(
                    max_length=100,
                    help_text='Título do chamado'
                )),
                ('observacoes', models.TextField(
                    max_length=500,
                    blank=True,
                    default='',
                    help_text='Observações'
                )),
                ('status', models.CharField(
                    max_length=20,
                    choices=[
                        ('ABERTO', 'Aberto'),
                        ('EM_ANDAMENTO', 'Em andamento'),
                        ('PAUSADO', 'Pausado'),
                        ('ENCERRADO', 'Encerrado'),
                        ('CANCELADO', 'Cancelado'),
                    ],
                    default='ABERTO',
                    db_index=True,
                    help_text='Estado atual do chamado'
                )),
                ('prioridade', models.CharField(
                    max_length=10,
                    choices=[
                        ('BAIXA', 'Baixa'),
                        ('MEDIA', 'Média'),
                        ('ALTA', 'Alta'),
                    ],
                    default='MEDIA',
                    db_index=True,
                    help_text='Nível de prioridade'
                )),
                ('aberto_em', models.DateTimeField(
                    default=django.utils.timezone.now,
                    db_index=True,
                    help_text='Data/hora de abertura'
                )),
                ('encerrado_em', models.DateTimeField(
                    null=True,
                    blank=True,
                    help_text='Data/hora de encerramento'
                )),
                ('cliente', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='chamados_como_cliente',
                    to='pessoas.pessoamodel',
                    help_text='Cliente que abriu o chamado'
                )),
                ('tecnico', models.ForeignKey(
                    null=True,
                    blank=True,
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='chamados_como_tecnico',
                    to='pessoas.pessoamodel',
                    help_text='Técnico responsável'
                )),
            ],
            options={
                'verbose_name': 'Chamado',
                'verbose_name_plural': 'Chamados',
                'db_table': 'chamados',
                'ordering': ['-aberto_em'],
                'indexes': [
                    models.Index(fields=['status', 'prioridade'], name='chamados_status_prio_idx'),
                ],
            },
        ),
    ]
