import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('core', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Result',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('runner_name', models.CharField(max_length=100)),
                ('house', models.CharField(choices=[('Sheaffe', 'Sheaffe'), ('Garran', 'Garran'), ('Burgmann', 'Burgmann'), ('Garnsey', 'Garnsey'), ('Hay', 'Hay'), ('Blaxland', 'Blaxland'), ('Edwards', 'Edwards'), ('Middelton', 'Middelton'), ('Eddison', 'Eddison'), ('Jones', 'Jones')], max_length=20)),
                ('time', models.CharField(max_length=16)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('event', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='results', to='core.event')),
            ],
            options={
                'ordering': ['created_at', 'id'],
                'indexes': [models.Index(fields=['event', 'created_at'], name='result_event_created_idx')],
            },
        ),
    ]
