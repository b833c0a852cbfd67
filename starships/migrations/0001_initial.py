from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Starship',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(blank=True, default='', max_length=255)),
                ('model', models.CharField(blank=True, default='', max_length=255)),
                ('manufacturer', models.CharField(blank=True, default='', max_length=255)),
                ('starship_class', models.CharField(blank=True, default='', max_length=255)),
                ('crew', models.CharField(blank=True, default='', max_length=255)),
                ('passengers', models.CharField(blank=True, default='', max_length=255)),
                ('source_url', models.URLField(blank=True, max_length=500, null=True)),
                ('version', models.PositiveIntegerField(default=1)),
            ],
            options={
                'verbose_name': 'Starship',
                'verbose_name_plural': 'Starships',
                'db_table': 'starships',
                'ordering': ['id'],
            },
        ),
    ]
